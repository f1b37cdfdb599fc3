"""Pattern registry: regex rules keyed by component type.

Handlers write their rules into a registry during an explicit build phase;
after `freeze()` the registry is read-only and every query is a pure
function of the normalized MPN.
"""

import logging
import re
from dataclasses import dataclass

from .errors import InvalidPatternError, RegistryFrozenError
from .normalize import normalize
from .types import ComponentType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternRule:
    """One compiled case-insensitive rule contributed by one handler."""
    component_type: ComponentType
    pattern: re.Pattern[str]
    owner: str = ""

    def matches(self, normalized_mpn: str) -> bool:
        return self.pattern.match(normalized_mpn) is not None


def _compile(pattern: str | re.Pattern[str], owner: str) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        if pattern.flags & re.IGNORECASE:
            return pattern
        return re.compile(pattern.pattern, pattern.flags | re.IGNORECASE)
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise InvalidPatternError(pattern, owner, str(e)) from e


class PatternRegistry:
    """Mapping ComponentType -> ordered rules, additive and idempotent.

    Registering the same (type, pattern text, owner) twice is a no-op, so a
    handler may be initialized against one registry more than once. Once
    frozen, only rules that are already present may be re-registered.
    """

    def __init__(self):
        self._rules: dict[ComponentType, list[PatternRule]] = {}
        self._keys: set[tuple[ComponentType, str, str]] = set()
        self._frozen = False

    # =========================================================================
    # BUILD PHASE
    # =========================================================================

    def register(
        self,
        component_type: ComponentType,
        pattern: str | re.Pattern[str],
        owner: str = "",
    ) -> bool:
        """Add a rule for a component type.

        Args:
            component_type: Type the rule classifies
            pattern: Regex text (compiled case-insensitively) or a compiled pattern
            owner: Name of the contributing handler

        Returns:
            True if a new rule was added, False if it was already present.

        Raises:
            InvalidPatternError: pattern text is not a valid regex
            RegistryFrozenError: registry is frozen and the rule is new
        """
        compiled = _compile(pattern, owner)
        key = (component_type, compiled.pattern, owner)
        if key in self._keys:
            return False
        if self._frozen:
            raise RegistryFrozenError(compiled.pattern, owner)

        self._keys.add(key)
        self._rules.setdefault(component_type, []).append(
            PatternRule(component_type, compiled, owner)
        )
        return True

    def freeze(self) -> None:
        """Seal the registry; later attempts to add new rules raise."""
        if not self._frozen:
            logger.debug(f"Registry frozen with {len(self._keys)} rules across {len(self._rules)} types")
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # =========================================================================
    # QUERIES
    # =========================================================================

    def matches(self, mpn: str | None, component_type: ComponentType | None) -> bool:
        """True if any rule for the type matches the normalized MPN."""
        if component_type is None:
            return False
        normalized = normalize(mpn)
        if not normalized:
            return False
        return any(rule.matches(normalized) for rule in self._rules.get(component_type, ()))

    def matches_for(
        self,
        owner: str,
        mpn: str | None,
        component_type: ComponentType | None,
    ) -> bool:
        """Like `matches`, restricted to rules contributed by one owner."""
        if component_type is None:
            return False
        normalized = normalize(mpn)
        if not normalized:
            return False
        return any(
            rule.matches(normalized)
            for rule in self._rules.get(component_type, ())
            if rule.owner == owner
        )

    def has_pattern(self, component_type: ComponentType | None) -> bool:
        if component_type is None:
            return False
        return bool(self._rules.get(component_type))

    def rules(self, component_type: ComponentType) -> tuple[PatternRule, ...]:
        return tuple(self._rules.get(component_type, ()))

    def supported_types(self) -> frozenset[ComponentType]:
        return frozenset(t for t, rules in self._rules.items() if rules)

    def owners(self) -> frozenset[str]:
        return frozenset(owner for _, _, owner in self._keys)

    def owners_for_type(self, component_type: ComponentType) -> frozenset[str]:
        return frozenset(rule.owner for rule in self._rules.get(component_type, ()))

    def owner_for_mpn(self, mpn: str | None) -> str | None:
        """Owner of the first rule (in registration order) matching the MPN."""
        normalized = normalize(mpn)
        if not normalized:
            return None
        for rules in self._rules.values():
            for rule in rules:
                if rule.matches(normalized):
                    return rule.owner
        return None

    def __len__(self) -> int:
        return len(self._keys)
