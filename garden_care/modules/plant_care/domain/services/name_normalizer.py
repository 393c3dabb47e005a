# 📄 File: garden_care/modules/plant_care/domain/services/name_normalizer.py
# 🧭 Purpose (Layman Explanation):
# Tidies up the plant names gardeners type so that "English Lavender", "Sungold Tomato" or
# "David Austin Rose 'Gertrude Jekyll'" all land on the same care guide as their plain plant type.
# 🧪 Purpose (Technical Summary):
# Deterministic, idempotent plant-name canonicalizer: trims, strips quoted cultivar names,
# applies an ordered exact-match alias rule table, then removes noise qualifier tokens.
# 🔗 Dependencies:
# re, dataclasses, garden_care.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# profile_generation_service.py, garden_care.modules.plant_care (public API)

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from garden_care.shared.core.exceptions import ValidationError
from garden_care.shared.utils.helpers import clean_whitespace

QUOTED_CULTIVAR_RE = re.compile(r"""['"][^'"]*['"]""")


@dataclass(frozen=True)
class AliasRule:
    """Maps one exact lowercase phrase to its canonical label."""
    phrase: str
    canonical: str

    def matches(self, lowered: str) -> bool:
        return lowered == self.phrase


# Evaluated in declared order; first match wins.
DEFAULT_ALIAS_RULES: Tuple[AliasRule, ...] = (
    # Tomato varieties -> types
    AliasRule("sungold tomato", "Cherry Tomato"),
    AliasRule("beefsteak tomato", "Tomato"),
    AliasRule("cherry tomato", "Cherry Tomato"),
    AliasRule("plum tomato", "Tomato"),
    # Rose classes keep their general type
    AliasRule("hybrid tea rose", "Hybrid Tea Rose"),
    AliasRule("climbing rose", "Climbing Rose"),
    AliasRule("shrub rose", "Shrub Rose"),
    AliasRule("floribunda rose", "Floribunda Rose"),
    AliasRule("david austin rose", "David Austin Rose"),
    # Lavender varieties
    AliasRule("english lavender", "Lavender"),
    AliasRule("french lavender", "French Lavender"),
)

# Generic qualifiers removed wherever they appear, in declared order.
DEFAULT_NOISE_TOKENS: Tuple[str, ...] = ("english", "dwarf", "compact")


class NameNormalizer:
    """
    Canonicalizes free-text plant names to maximize profile cache hits.

    Steps, in order:
    1. Trim whitespace.
    2. Strip quoted cultivar names ('Gertrude Jekyll'). If nothing is left,
       the trimmed input is returned as is.
    3. Exact-match the lowercased result against the alias rules; a match
       returns the canonical label verbatim.
    4. Remove noise qualifier tokens (case-insensitive, repeated until
       stable) and collapse whitespace. If nothing is left, the value from
       step 2 is kept. The alias rules are consulted once more on the
       stripped name so that normalize(normalize(x)) == normalize(x).

    Original casing is preserved outside of alias matches.
    """

    def __init__(
        self,
        alias_rules: Optional[Sequence[AliasRule]] = None,
        noise_tokens: Optional[Iterable[str]] = None
    ):
        self.alias_rules: Tuple[AliasRule, ...] = tuple(
            alias_rules if alias_rules is not None else DEFAULT_ALIAS_RULES
        )
        tokens = noise_tokens if noise_tokens is not None else DEFAULT_NOISE_TOKENS
        self.noise_tokens: Tuple[str, ...] = tuple(t.lower() for t in tokens if t)
        self._noise_patterns = tuple(re.compile(re.escape(t), re.IGNORECASE) for t in self.noise_tokens)

    def normalize(self, raw: str) -> str:
        """
        Canonicalize a plant name.

        Args:
            raw: Plant name as typed by the user

        Returns:
            Normalized plant type name

        Raises:
            ValidationError: If raw is not a string
        """
        if not isinstance(raw, str):
            raise ValidationError("Plant name must be a string", field="plant_name", value=raw)

        name = raw.strip()
        without_quotes = clean_whitespace(QUOTED_CULTIVAR_RE.sub("", name))
        if not without_quotes:
            return name

        alias = self._match_alias(without_quotes)
        if alias is not None:
            return alias

        stripped = self._strip_noise(without_quotes)
        if not stripped:
            return without_quotes

        alias = self._match_alias(stripped)
        if alias is not None:
            return alias

        return stripped

    def _match_alias(self, name: str) -> Optional[str]:
        lowered = name.lower()
        for rule in self.alias_rules:
            if rule.matches(lowered):
                return rule.canonical
        return None

    def _strip_noise(self, name: str) -> str:
        previous = None
        current = name
        # Removing one token can splice another together, so repeat until stable
        while current != previous:
            previous = current
            for pattern in self._noise_patterns:
                current = pattern.sub("", current)
        return clean_whitespace(current)


_default_normalizer = NameNormalizer()


def normalize_plant_name(raw: str) -> str:
    """Normalize a plant name with the default alias and noise tables."""
    return _default_normalizer.normalize(raw)
