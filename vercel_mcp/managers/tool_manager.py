"""
ToolManager - bounded, LRU-evicting lifecycle for tool groups.

Tool groups are registered on the MCP host in batches so that only a
limited slice of the Vercel catalog is advertised at any one time.

Design decisions:
- Capacity: at most ``capacity`` groups are tracked as active (default 2)
- Eviction: least-recently-used group, ties broken by insertion order
- Slot reservation: victim is removed synchronously, before the loader awaits
- Failed loads: nothing is inserted and an eviction already made is NOT undone
- Eviction is bookkeeping only: the host keeps tools registered by an
  evicted group (it exposes no unregister operation)
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Set

from .classifier import classify
from ..tool_groups import GroupRegistry, LoadError

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 2

Clock = Callable[[], float]


# ============================================================================
# Exceptions
# ============================================================================

class EvictionUnderflow(AssertionError):
    """Victim selection attempted on an empty usage map."""
    pass


class GroupNotActive(KeyError):
    """Operation requires an active group."""
    pass


class BootstrapError(RuntimeError):
    """An initial tool group failed to load during strict bootstrap."""

    def __init__(self, failed: List[str]):
        self.failed = failed
        super().__init__(f"Failed to load initial tool groups: {', '.join(failed)}")


# ============================================================================
# Data Classes
# ============================================================================

@dataclass
class GroupUsage:
    """Usage bookkeeping for an active group."""
    last_used: float
    tool_names: List[str] = field(default_factory=list)


# ============================================================================
# Eviction Policy
# ============================================================================

def select_victim(usage: Mapping[str, float]) -> str:
    """
    Select the least-recently-used group.

    Args:
        usage: Insertion-ordered mapping of group name to last-used timestamp

    Returns:
        Name of the group with the smallest timestamp. On ties the first
        entry in iteration order wins.

    Raises:
        EvictionUnderflow: If usage is empty
    """
    if not usage:
        raise EvictionUnderflow("Cannot select an eviction victim from an empty usage map")

    victim = None
    oldest = None
    for name, last_used in usage.items():
        # Strict comparison keeps the earliest entry on ties
        if oldest is None or last_used < oldest:
            victim, oldest = name, last_used

    return victim


# ============================================================================
# Active Group Set
# ============================================================================

class ActiveGroupSet:
    """
    Bounded collection of active tool groups.

    ``len(self) <= capacity`` holds before and after every operation.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, clock: Optional[Clock] = None):
        """
        Initialize an empty active set.

        Args:
            capacity: Maximum number of concurrently active groups (> 0)
            clock: Timestamp source (default: time.monotonic)
        """
        if capacity <= 0:
            raise ValueError(f"Capacity must be positive, got {capacity}")

        self.capacity = capacity
        self._clock = clock or time.monotonic
        self._groups: Dict[str, GroupUsage] = {}

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, name: str) -> bool:
        return self.is_active(name)

    def is_active(self, name: str) -> bool:
        """Check if group is currently active."""
        return name in self._groups

    def usage(self, name: str) -> GroupUsage:
        """Return usage bookkeeping for an active group."""
        if name not in self._groups:
            raise GroupNotActive(name)
        return self._groups[name]

    def usage_map(self) -> Dict[str, float]:
        """Return an insertion-ordered copy of name -> last_used."""
        return {name: usage.last_used for name, usage in self._groups.items()}

    def snapshot(self) -> Set[str]:
        """Return the set of active group names."""
        return set(self._groups)

    def names(self) -> List[str]:
        """Return active group names in insertion order."""
        return list(self._groups)

    def touch(self, name: str) -> None:
        """
        Mark an active group as used now.

        Raises:
            GroupNotActive: If group is not active
        """
        usage = self.usage(name)
        # Never move a timestamp backwards, even with a misbehaving clock
        usage.last_used = max(usage.last_used, self._clock())

    def unload(self, name: str) -> Optional[GroupUsage]:
        """
        Drop bookkeeping for a group.

        Returns:
            The removed usage, or None if the group was not active
        """
        return self._groups.pop(name, None)

    def evict_if_full(self) -> Optional[str]:
        """
        Free one slot if the set is at capacity.

        Returns:
            Name of the evicted group, or None if no eviction was needed
        """
        if len(self._groups) < self.capacity:
            return None

        victim = select_victim(self.usage_map())
        del self._groups[victim]
        return victim

    async def load(self, name: str, registry: GroupRegistry) -> Optional[str]:
        """
        Activate a group, evicting the LRU group if at capacity.

        Args:
            name: Group name
            registry: Registry resolving the group's loader

        Returns:
            Name of the group evicted to make room, or None

        Raises:
            LoadError: If the group is unknown or its loader fails. A group
                evicted before the failure stays evicted.
        """
        if self.is_active(name):
            self.touch(name)
            return None

        victim = self.evict_if_full()
        if victim is not None:
            logger.info(f"Evicted tool group: {victim} (least recently used)")

        # UnknownGroup is a LoadError; an eviction above still stands
        loader = registry.resolve(name)
        try:
            tool_names = await loader()
        except Exception as e:
            raise LoadError(name, e) from e

        self._groups[name] = GroupUsage(
            last_used=self._clock(),
            tool_names=list(tool_names or [])
        )
        return victim


# ============================================================================
# Tool Manager (facade)
# ============================================================================

class ToolManager:
    """
    Lifecycle manager for Vercel tool groups.

    Owns one ActiveGroupSet for its lifetime. Loads are serialized through
    an asyncio.Lock so overlapping callers cannot both evict against the
    same full set.
    """

    def __init__(
        self,
        registry: GroupRegistry,
        capacity: int = DEFAULT_CAPACITY,
        clock: Optional[Clock] = None
    ):
        """
        Initialize tool manager.

        Args:
            registry: Registry of known tool groups
            capacity: Maximum number of active groups
            clock: Timestamp source (default: time.monotonic)
        """
        self.registry = registry
        self.active = ActiveGroupSet(capacity=capacity, clock=clock)
        self._lock = asyncio.Lock()

        logger.info(f"ToolManager initialized (capacity: {capacity})")

    # ========================================================================
    # Public API
    # ========================================================================

    async def load_group(self, name: str) -> bool:
        """
        Load a tool group, or refresh it if already active.

        Failures are logged and never raised.

        Returns:
            True if the group is active after the call
        """
        async with self._lock:
            already_active = self.active.is_active(name)
            try:
                await self.active.load(name, self.registry)
            except LoadError as e:
                logger.error(f"Failed to load tool group {name}: {e}")
                return False

        if not already_active:
            count = len(self.active.usage(name).tool_names)
            logger.info(f"Loaded tool group: {name} ({count} tools)")
        return True

    async def bootstrap(self, groups: List[str], strict: bool = False) -> List[str]:
        """
        Load the initial groups one after another, in the given order.

        Args:
            groups: Group names to load
            strict: Raise if any group fails instead of continuing

        Returns:
            Names of the groups that failed to load

        Raises:
            BootstrapError: If strict and at least one group failed
        """
        failed = []
        for name in groups:
            if not await self.load_group(name):
                failed.append(name)

        if failed and strict:
            raise BootstrapError(failed)
        return failed

    async def unload_group(self, name: str) -> None:
        """Drop bookkeeping for a tool group (its tools stay registered)."""
        async with self._lock:
            if self.active.unload(name) is not None:
                logger.info(f"Unloaded tool group: {name}")

    def get_active_groups(self) -> List[str]:
        """Return active group names in load order."""
        return self.active.names()

    def is_active(self, name: str) -> bool:
        """Check if a group is active."""
        return self.active.is_active(name)

    async def suggest_and_load_groups(self, query: str) -> Optional[str]:
        """
        Classify a free-text query and load the matching group.

        Args:
            query: Arbitrary text (user utterance, tool name, ...)

        Returns:
            The classified group name, or None if nothing matched
        """
        group = classify(query)
        if group is None:
            logger.debug(f"No tool group matched query: {query!r}")
            return None

        await self.load_group(group)
        return group

    def record_tool_use(self, tool_name: str) -> Optional[str]:
        """
        Touch the active group that registered a tool.

        Returns:
            The group touched, or None if no active group owns the tool
        """
        for name in self.active.names():
            if tool_name in self.active.usage(name).tool_names:
                self.active.touch(name)
                return name
        return None

    async def get_group_tools(self, name: str) -> List[str]:
        """
        Tool names recorded for an active group.

        Inactive groups return an empty list; the loader is not invoked
        since that would register the group's tools again.
        """
        if not self.active.is_active(name):
            return []
        return list(self.active.usage(name).tool_names)
