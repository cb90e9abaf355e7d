"""Module with the library of phrases fingerprinting LLM-written text."""

import tomllib
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

from lexidetect.configuration import config
from lexidetect.data_models import FingerprintGroup, ModelFamily

PHRASE_BOOST_PER_HIT = 5
MAX_PHRASE_BOOST = 25

# Order, in which a phrase's family membership is checked when explaining it.
FAMILY_ORDER = (FingerprintGroup.GPT, FingerprintGroup.CLAUDE, FingerprintGroup.GEMINI)


class FingerprintLibrary(BaseModel):
    """Immutable collection of lowercase fingerprint phrases grouped by origin."""

    generic: tuple[str, ...] = Field(..., min_length=1)
    gpt: tuple[str, ...] = Field(..., min_length=1, alias="GPT")
    claude: tuple[str, ...] = Field(..., min_length=1, alias="Claude")
    gemini: tuple[str, ...] = Field(..., min_length=1, alias="Gemini")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("generic", "gpt", "claude", "gemini", mode="after")
    @classmethod
    def normalise_phrases(cls, phrases: tuple[str, ...]) -> tuple[str, ...]:
        """Lowercase phrases and reject blank ones."""
        if any(not phrase.strip() for phrase in phrases):
            raise ValueError("Fingerprint phrases cannot be blank.")
        return tuple(dict.fromkeys(phrase.lower() for phrase in phrases))

    def phrases_of(self, group: FingerprintGroup) -> tuple[str, ...]:
        """
        Get phrases of a single group.

        Args:
            group (FingerprintGroup): The group of phrases.

        Returns:
            tuple[str, ...]: Lowercase phrases of the group.
        """
        return {
            FingerprintGroup.GENERIC: self.generic,
            FingerprintGroup.GPT: self.gpt,
            FingerprintGroup.CLAUDE: self.claude,
            FingerprintGroup.GEMINI: self.gemini,
        }[group]

    def phrases_of_family(self, family: ModelFamily) -> tuple[str, ...]:
        """Get fingerprint phrases of a model family."""
        return self.phrases_of(FingerprintGroup(family.value))

    def groups_of(self, phrase: str) -> frozenset[FingerprintGroup]:
        """
        Get all groups a phrase belongs to.

        Args:
            phrase (str): A phrase, case-insensitive.

        Returns:
            frozenset[FingerprintGroup]: Groups containing the phrase. Empty if the
                phrase is not a fingerprint.
        """
        phrase = phrase.lower()
        return frozenset(
            group for group in FingerprintGroup if phrase in self.phrases_of(group)
        )

    def family_of(self, phrase: str) -> ModelFamily | None:
        """
        Get the first model family fingerprinted by a phrase.

        Args:
            phrase (str): A phrase, case-insensitive.

        Returns:
            ModelFamily | None: The family, or None if the phrase is generic only
                or not a fingerprint at all.
        """
        groups = self.groups_of(phrase)
        for group in FAMILY_ORDER:
            if group in groups:
                return group.to_model_family()
        return None

    def all_phrases(self) -> list[str]:
        """
        Get every fingerprint phrase once, longest first.

        Returns:
            list[str]: De-duplicated phrases sorted by length in descending order.
        """
        unique = dict.fromkeys(
            phrase for group in FingerprintGroup for phrase in self.phrases_of(group)
        )
        return sorted(unique, key=len, reverse=True)

    def find(self, text: str, group: FingerprintGroup) -> list[str]:
        """
        Find phrases of a group contained in a text.

        Args:
            text (str): The text to be searched, case-insensitive.
            group (FingerprintGroup): The group of phrases.

        Returns:
            list[str]: Contained phrases in the order of the group.
        """
        lowercased_text = text.lower()
        return [
            phrase for phrase in self.phrases_of(group) if phrase in lowercased_text
        ]

    def phrase_boost(self, text: str) -> float:
        """
        Calculate a boost to AI confidence from generic AI phrases.

        Args:
            text (str): The analysed text.

        Returns:
            float: 5 points for each generic phrase found, at most 25 points.
        """
        hits = len(self.find(text, FingerprintGroup.GENERIC))
        return float(min(MAX_PHRASE_BOOST, PHRASE_BOOST_PER_HIT * hits))


def load_fingerprint_library(
    fingerprints_file: Path = config.fingerprints_file,
) -> FingerprintLibrary:
    """
    Load fingerprint phrases from a TOML file.

    Args:
        fingerprints_file (Path, optional): Path to the file. Defaults to the value
            from the configuration.

    Raises:
        FileNotFoundError: Raised if the file does not exist.

    Returns:
        FingerprintLibrary: The loaded library.
    """
    if not fingerprints_file.exists():
        raise FileNotFoundError(
            f"There is no fingerprints file {fingerprints_file} to load phrases from."
        )

    with fingerprints_file.open("rb") as f:
        groups = tomllib.load(f)
    library = FingerprintLibrary.model_validate(groups)
    logger.debug(
        f"Loaded {len(library.all_phrases())} fingerprint phrases "
        f"from {fingerprints_file}"
    )
    return library
