"""
Personalized Greeting Generation Module

This module turns a guest's name and language preference into the salutation used on
the first line of an invitation email, e.g. "Vážený pane Nováku" or "Dear Ms. Smith".

## Overview

The core functionality is provided by the `GreetingComposer` class, which runs a short
pipeline for every request:

1. **Input Normalization**: Strips name parts and resolves the language tag
2. **Gender Classification**: Curated name lists, Czech surname endings, first-name endings
3. **Vocative Declension**: Czech male surnames are declined for direct address
4. **Salutation Assembly**: Honorific + adjective agreement per language and formality
5. **Fallback Policy**: Degrades to first-name or generic greetings, never to an empty string

## Architecture

- **NameRegistry**: Immutable base name sets plus a versioned, append-only override overlay
- **GenderClassifier**: Pure classifier reading registry snapshots
- **SurnameDeclensionEngine**: Special-case dictionary first, then ordered suffix rules
- **GreetingComposer**: Orchestrates classification, declension and fallbacks
- **InputValidator**: Advisory checks for UI hints; never blocks generation

## Usage Examples

```python
from osloveni.greetings import generate_greeting

result = generate_greeting("Jan", "Novák", "czech")
# result.text == "Vážený pane Nováku", result.confidence is Confidence.HIGH

result = generate_greeting("Marie", "Nováková", "czech")
# result.text == "Vážená paní Nováková"

result = generate_greeting("", "", "english")
# result.text == "Dear Guest", result.confidence is Confidence.LOW
```

## Confidence

- `HIGH`: gender known and every requested name part present
- `MEDIUM`: gender unknown, a name-based greeting was still produced
- `LOW`: formal request without a surname, or a generic/terminal fallback

## Thread Safety

Lookup tables are frozen at import time. The only mutable state is the registry overlay,
which is replaced wholesale under a lock; readers always see a consistent snapshot.
The shared composer behind the module-level functions is created once, under a lock.
"""

from __future__ import annotations
import logging
import threading
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple, Union

from osloveni.greeting_data import (
    MALE_NAMES,
    FEMALE_NAMES,
    CZECH_FEMALE_GIVEN_ENDINGS,
    CZECH_FEMALE_E_ENDING_MIN_LENGTH,
    ENGLISH_FEMALE_GIVEN_ENDINGS,
    CZECH_FEMALE_SURNAME_ENDINGS,
    CZECH_MALE_SURNAME_ENDINGS,
    LIKELY_CZECH_SURNAME_ENDINGS,
    DECLENSION_RULE_RECORDS,
    VOCATIVE_SPECIAL_CASES,
    CZECH_HONORIFICS,
    CZECH_DEAR,
    CZECH_GENERIC_GREETING,
    ENGLISH_HONORIFICS,
    ENGLISH_NEUTRAL_HONORIFIC,
    ENGLISH_DEAR,
    ENGLISH_GENERIC_GREETING,
    CZECH_SALUTATION_WORDS,
    OPTION_DESCRIPTIONS,
)


# ════════════════════════════════════════════════════════════════════════════════
# CLOSED VOCABULARIES
# ════════════════════════════════════════════════════════════════════════════════


class LanguageTag(Enum):
    """Supported greeting languages. Anything unrecognised resolves to English."""

    ENGLISH = "english"
    CZECH = "czech"

    @classmethod
    def parse(cls, value: Union["LanguageTag", str, None]) -> "LanguageTag":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
            if key:
                logging.debug(f"Unsupported language '{value}', using English")
        return cls.ENGLISH

    @classmethod
    def is_supported(cls, value: Union["LanguageTag", str, None]) -> bool:
        """True for a known language or for no language at all."""
        if value is None or isinstance(value, cls):
            return True
        if not isinstance(value, str):
            return False
        key = value.strip().lower()
        return not key or key in {member.value for member in cls}


class GenderLabel(Enum):
    MALE = "male"
    FEMALE = "female"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Union["GenderLabel", str, None]) -> "GenderLabel":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key == "male":
                return cls.MALE
            if key == "female":
                return cls.FEMALE
        return cls.UNKNOWN

    @property
    def is_known(self) -> bool:
        return self is not GenderLabel.UNKNOWN


class Confidence(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# ════════════════════════════════════════════════════════════════════════════════
# RESULT TYPES
# ════════════════════════════════════════════════════════════════════════════════


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


@dataclass(frozen=True)
class PersonName:
    """Normalized request input."""

    first_name: str
    last_name: str
    language: LanguageTag

    @classmethod
    def create(
        cls, first_name: Optional[str], last_name: Optional[str], language: Union[LanguageTag, str, None]
    ) -> "PersonName":
        return cls(_clean(first_name), _clean(last_name), LanguageTag.parse(language))

    @property
    def is_empty(self) -> bool:
        return not self.first_name and not self.last_name


@dataclass(frozen=True)
class DeclensionRule:
    """A suffix replacement; a rule whose replacement equals its suffix keeps the word as is."""

    match_suffix: str
    replacement: str
    precedence_group: int

    @property
    def is_identity(self) -> bool:
        return self.match_suffix == self.replacement

    def matches(self, word: str) -> bool:
        return word.lower().endswith(self.match_suffix)

    def apply(self, word: str) -> str:
        return word[: len(word) - len(self.match_suffix)] + self.replacement


@dataclass(frozen=True)
class GreetingMetadata:
    has_surname: bool
    formal: bool
    surname_looks_czech: bool


@dataclass(frozen=True)
class GreetingResult:
    """Generated greeting plus provenance, shown next to the "auto-generated" indicator."""

    text: str
    confidence: Confidence
    method: str
    detected_gender: GenderLabel
    language: LanguageTag
    metadata: GreetingMetadata

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "confidence": self.confidence.value,
            "method": self.method,
            "detected_gender": self.detected_gender.value,
            "language": self.language.value,
            "metadata": {
                "has_surname": self.metadata.has_surname,
                "formal": self.metadata.formal,
                "surname_looks_czech": self.metadata.surname_looks_czech,
            },
        }


@dataclass(frozen=True)
class GreetingOption:
    """One selectable alternative offered by the guest editor."""

    result: GreetingResult
    label: str
    description: str

    @property
    def text(self) -> str:
        return self.result.text

    def to_dict(self) -> Dict[str, Any]:
        data = self.result.to_dict()
        data.update(label=self.label, description=self.description)
        return data


@dataclass(frozen=True)
class ValidationOutcome:
    is_valid: bool
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()


@dataclass(frozen=True)
class _Salutation:
    text: str
    confidence: Confidence
    method: str


# ════════════════════════════════════════════════════════════════════════════════
# CONFIGURATION
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class GreetingConfig:
    """Immutable composer defaults."""

    default_language: LanguageTag
    formal: bool
    fallback_to_first_name: bool
    trailing_comma: bool

    @classmethod
    def create_default(cls) -> "GreetingConfig":
        return cls(
            default_language=LanguageTag.ENGLISH,
            formal=True,
            fallback_to_first_name=True,
            trailing_comma=False,
        )

    def with_default_language(self, language: Union[LanguageTag, str]) -> "GreetingConfig":
        return replace(self, default_language=LanguageTag.parse(language))

    def with_formal(self, formal: bool) -> "GreetingConfig":
        return replace(self, formal=formal)

    def with_fallback_to_first_name(self, enabled: bool) -> "GreetingConfig":
        return replace(self, fallback_to_first_name=enabled)

    def with_trailing_comma(self, enabled: bool) -> "GreetingConfig":
        return replace(self, trailing_comma=enabled)


# ════════════════════════════════════════════════════════════════════════════════
# NAME REGISTRY
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class RegistrySnapshot:
    """Consistent, immutable view of the registry at one version."""

    version: int
    male_names: FrozenSet[str]
    female_names: FrozenSet[str]
    overrides: Mapping[str, GenderLabel] = field(default_factory=lambda: MappingProxyType({}))

    def lookup(self, name: str) -> GenderLabel:
        """Manual overrides win over the curated lists; male is checked before female."""
        key = _clean(name).lower()
        if not key:
            return GenderLabel.UNKNOWN
        override = self.overrides.get(key)
        if override is not None:
            return override
        if key in self.male_names:
            return GenderLabel.MALE
        if key in self.female_names:
            return GenderLabel.FEMALE
        return GenderLabel.UNKNOWN


class NameRegistry:
    """Curated first names with an append-only override layer (single writer, many readers)."""

    def __init__(self, male_names: Iterable[str] = MALE_NAMES, female_names: Iterable[str] = FEMALE_NAMES):
        self._lock = threading.Lock()
        self._snapshot = RegistrySnapshot(
            version=0,
            male_names=frozenset(n.lower() for n in male_names),
            female_names=frozenset(n.lower() for n in female_names),
        )

    @classmethod
    def default(cls) -> "NameRegistry":
        return cls()

    @property
    def version(self) -> int:
        return self._snapshot.version

    def snapshot(self) -> RegistrySnapshot:
        return self._snapshot

    def register(self, name: str, gender: Union[GenderLabel, str]) -> RegistrySnapshot:
        """
        Add or replace a manual override and publish a new snapshot.

        Raises:
            ValueError: empty name, or a gender other than male/female
        """
        key = _clean(name).lower()
        if not key:
            raise ValueError("name must not be empty")
        label = GenderLabel.parse(gender)
        if not label.is_known:
            raise ValueError(f"gender must be 'male' or 'female', got {gender!r}")

        with self._lock:
            current = self._snapshot
            overrides = dict(current.overrides)
            overrides[key] = label
            self._snapshot = replace(current, version=current.version + 1, overrides=MappingProxyType(overrides))
            snapshot = self._snapshot

        logging.info(f"Registered name '{key}' as {label.value} (registry version {snapshot.version})")
        return snapshot


# ════════════════════════════════════════════════════════════════════════════════
# GENDER CLASSIFICATION
# ════════════════════════════════════════════════════════════════════════════════


def _czech_given_name_hint(first_name: str) -> GenderLabel:
    if first_name.endswith(CZECH_FEMALE_GIVEN_ENDINGS):
        return GenderLabel.FEMALE
    if first_name.endswith("e") and len(first_name) >= CZECH_FEMALE_E_ENDING_MIN_LENGTH:
        return GenderLabel.FEMALE
    return GenderLabel.UNKNOWN


def _english_given_name_hint(first_name: str) -> GenderLabel:
    if first_name.endswith(ENGLISH_FEMALE_GIVEN_ENDINGS):
        return GenderLabel.FEMALE
    return GenderLabel.UNKNOWN


_GIVEN_NAME_HINTS: Mapping[LanguageTag, Callable[[str], GenderLabel]] = MappingProxyType(
    {
        LanguageTag.CZECH: _czech_given_name_hint,
        LanguageTag.ENGLISH: _english_given_name_hint,
    }
)


def czech_surname_gender(last_name: str) -> GenderLabel:
    """Gender implied by a Czech surname ending; female endings are checked first."""
    key = _clean(last_name).lower()
    if not key:
        return GenderLabel.UNKNOWN
    if key.endswith(CZECH_FEMALE_SURNAME_ENDINGS):
        return GenderLabel.FEMALE
    if key.endswith(CZECH_MALE_SURNAME_ENDINGS):
        return GenderLabel.MALE
    return GenderLabel.UNKNOWN


class GenderClassifier:
    """Heuristic gender classification from name parts. Never raises."""

    def __init__(self, registry: Optional[NameRegistry] = None):
        self._registry = registry or NameRegistry.default()

    @property
    def registry(self) -> NameRegistry:
        return self._registry

    def classify(
        self,
        first_name: Optional[str],
        last_name: Optional[str] = "",
        language: Union[LanguageTag, str, None] = LanguageTag.ENGLISH,
    ) -> GenderLabel:
        first = _clean(first_name).lower()
        last = _clean(last_name).lower()
        lang = LanguageTag.parse(language)

        # 1. Curated names, any language
        gender = self._registry.snapshot().lookup(first)
        if gender.is_known:
            return gender

        # 2. Czech surname endings
        if lang is LanguageTag.CZECH and last:
            gender = czech_surname_gender(last)
            if gender.is_known:
                return gender

        # 3. First-name ending heuristics
        if first:
            return _GIVEN_NAME_HINTS[lang](first)

        return GenderLabel.UNKNOWN


# ════════════════════════════════════════════════════════════════════════════════
# VOCATIVE DECLENSION
# ════════════════════════════════════════════════════════════════════════════════


_ALL_CAPS_MIN_LENGTH = 3


def preserve_capitalization(original: str, declined: str) -> str:
    """
    Copy the case pattern of `original` onto `declined`, position by position.

    Characters past the end of the original are lowercase, unless the original is
    written entirely in capitals ("NOVÁK" -> "NOVÁKU"). One- and two-letter originals
    are too short to tell capitals from initials, so "B" -> "Be".
    """
    if not original or not declined:
        return declined

    all_caps = len(original) >= _ALL_CAPS_MIN_LENGTH and original.isupper()
    chars = []
    for i, ch in enumerate(declined):
        if i < len(original):
            chars.append(ch.upper() if original[i].isupper() else ch.lower())
        else:
            chars.append(ch.upper() if all_caps else ch.lower())
    return "".join(chars)


def _rule_order(rule: DeclensionRule) -> Tuple[int, int]:
    return rule.precedence_group, -len(rule.match_suffix)


def build_declension_rules(
    records: Iterable[Tuple[str, str, int]] = DECLENSION_RULE_RECORDS,
) -> Tuple[DeclensionRule, ...]:
    """Turn raw rule records into rules ordered by precedence group, longest suffix first."""
    rules = (DeclensionRule(suffix, replacement, group) for suffix, replacement, group in records)
    return tuple(sorted(rules, key=_rule_order))


DEFAULT_DECLENSION_RULES = build_declension_rules()


class SurnameDeclensionEngine:
    """Czech vocative for male surnames. Every other gender passes through untouched."""

    def __init__(
        self,
        rules: Optional[Iterable[DeclensionRule]] = None,
        special_cases: Optional[Mapping[str, str]] = None,
    ):
        if rules is None:
            self._rules = DEFAULT_DECLENSION_RULES
        else:
            self._rules = tuple(sorted(rules, key=_rule_order))
        cases = VOCATIVE_SPECIAL_CASES if special_cases is None else special_cases
        self._special_cases = MappingProxyType({k.lower(): v.lower() for k, v in cases.items()})

    @property
    def rules(self) -> Tuple[DeclensionRule, ...]:
        return self._rules

    @property
    def special_cases(self) -> Mapping[str, str]:
        return self._special_cases

    def find_rule(self, surname: str) -> Optional[DeclensionRule]:
        key = _clean(surname).lower()
        if not key:
            return None
        for rule in self._rules:
            if key.endswith(rule.match_suffix):
                return rule
        return None

    def decline(self, surname: str, gender: Union[GenderLabel, str, None]) -> str:
        if surname is None:
            return ""
        if GenderLabel.parse(gender) is not GenderLabel.MALE:
            return surname

        word = surname.strip()
        if not word:
            return word
        key = word.lower()

        # Lexical exceptions are authoritative over the suffix rules
        special = self._special_cases.get(key)
        if special is not None:
            return preserve_capitalization(word, special)

        rule = self.find_rule(key)
        if rule is None or rule.is_identity:
            return word
        return preserve_capitalization(word, rule.apply(key))


def czech_honorific(gender: Union[GenderLabel, str, None]) -> str:
    """'pane' / 'paní'; unknown gender takes the male form."""
    label = GenderLabel.parse(gender)
    return CZECH_HONORIFICS["female" if label is GenderLabel.FEMALE else "male"]


def is_likely_czech_surname(surname: Optional[str]) -> bool:
    key = _clean(surname).lower()
    return bool(key) and key.endswith(LIKELY_CZECH_SURNAME_ENDINGS)


# ════════════════════════════════════════════════════════════════════════════════
# INPUT VALIDATION
# ════════════════════════════════════════════════════════════════════════════════


class InputValidator:
    """Advisory checks shown as hints in the guest editor."""

    def validate(
        self,
        first_name: Optional[str],
        last_name: Optional[str],
        language: Union[LanguageTag, str, None] = None,
    ) -> ValidationOutcome:
        first = _clean(first_name)
        last = _clean(last_name)
        errors: List[str] = []
        warnings: List[str] = []

        if not first and not last:
            errors.append("At least first name or last name is required")

        if not LanguageTag.is_supported(language):
            warnings.append(f"Unsupported language '{language}', defaulting to English")

        if not first:
            warnings.append("First name missing - greeting quality may be reduced")

        if not last:
            warnings.append("Last name missing - formal greeting not possible")

        return ValidationOutcome(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))


# ════════════════════════════════════════════════════════════════════════════════
# GREETING COMPOSITION
# ════════════════════════════════════════════════════════════════════════════════


def with_trailing_comma(greeting: str) -> str:
    """Letters put a comma after the salutation line."""
    text = (greeting or "").rstrip()
    if not text or text.endswith(","):
        return text
    return text + ","


def detect_language_from_greeting(greeting: Optional[str]) -> LanguageTag:
    """Guess the language of an already written salutation (used on guest import)."""
    lowered = _clean(greeting).lower()
    if any(word in lowered for word in CZECH_SALUTATION_WORDS):
        return LanguageTag.CZECH
    return LanguageTag.ENGLISH


def fallback_greeting(
    first_name: Optional[str], last_name: Optional[str], language: Union[LanguageTag, str, None]
) -> str:
    """Terminal fallback. Always returns a non-empty string."""
    person = PersonName.create(first_name, last_name, language)
    if person.language is LanguageTag.CZECH:
        if person.first_name:
            return f"{CZECH_DEAR['male']} {person.first_name}"
        if person.last_name:
            return f"{CZECH_DEAR['male']} {CZECH_HONORIFICS['male']} {person.last_name}"
        return CZECH_GENERIC_GREETING
    if person.first_name:
        return f"{ENGLISH_DEAR} {person.first_name}"
    if person.last_name:
        return f"{ENGLISH_DEAR} {person.last_name}"
    return ENGLISH_GENERIC_GREETING


class GreetingComposer:
    """Builds the salutation for a guest. Never raises for any name input."""

    def __init__(
        self,
        config: Optional[GreetingConfig] = None,
        classifier: Optional[GenderClassifier] = None,
        declension: Optional[SurnameDeclensionEngine] = None,
    ):
        self._config = config or GreetingConfig.create_default()
        self._classifier = classifier or GenderClassifier()
        self._declension = declension or SurnameDeclensionEngine()
        self._validator = InputValidator()
        self._composers: Mapping[LanguageTag, Callable[[PersonName, GenderLabel, bool, bool], _Salutation]] = (
            MappingProxyType(
                {
                    LanguageTag.CZECH: self._compose_czech,
                    LanguageTag.ENGLISH: self._compose_english,
                }
            )
        )

    @property
    def config(self) -> GreetingConfig:
        return self._config

    @property
    def classifier(self) -> GenderClassifier:
        return self._classifier

    @property
    def declension(self) -> SurnameDeclensionEngine:
        return self._declension

    @property
    def registry(self) -> NameRegistry:
        return self._classifier.registry

    def compose(
        self,
        first_name: Optional[str],
        last_name: Optional[str],
        language: Union[LanguageTag, str, None] = None,
        formal: Optional[bool] = None,
        fallback_to_first_name: Optional[bool] = None,
    ) -> GreetingResult:
        """
        Main API method: compose a greeting with confidence and provenance.

        `formal` and `fallback_to_first_name` default to the composer config. A missing
        or unsupported language resolves to the config's default language / English.
        """
        formal = self._config.formal if formal is None else bool(formal)
        fallback = self._config.fallback_to_first_name
        if fallback_to_first_name is not None:
            fallback = bool(fallback_to_first_name)
        person = PersonName.create(
            first_name, last_name, self._config.default_language if language is None else language
        )

        gender = GenderLabel.UNKNOWN
        try:
            gender = self._classifier.classify(person.first_name, person.last_name, person.language)
            salutation = self._composers[person.language](person, gender, formal, fallback)
        except Exception as e:
            logging.warning(f"Greeting composition failed for {person}: {e}. Using fallback greeting.")
            salutation = _Salutation(
                fallback_greeting(person.first_name, person.last_name, person.language), Confidence.LOW, "fallback"
            )

        text = salutation.text or fallback_greeting(person.first_name, person.last_name, person.language)
        if self._config.trailing_comma:
            text = with_trailing_comma(text)

        return GreetingResult(
            text=text,
            confidence=salutation.confidence,
            method=salutation.method,
            detected_gender=gender,
            language=person.language,
            metadata=GreetingMetadata(
                has_surname=bool(person.last_name),
                formal=formal,
                surname_looks_czech=is_likely_czech_surname(person.last_name),
            ),
        )

    def compose_options(
        self,
        first_name: Optional[str],
        last_name: Optional[str],
        language: Union[LanguageTag, str, None] = None,
    ) -> List[GreetingOption]:
        """Formal option first, then the informal one if its text differs."""
        formal_result = self.compose(first_name, last_name, language, formal=True)
        descriptions = OPTION_DESCRIPTIONS[formal_result.language.value]
        options = [GreetingOption(formal_result, "Formal", descriptions["formal"])]

        informal_result = self.compose(first_name, last_name, language, formal=False)
        if informal_result.text != formal_result.text:
            options.append(GreetingOption(informal_result, "Informal", descriptions["informal"]))
        return options

    def validate(
        self,
        first_name: Optional[str],
        last_name: Optional[str],
        language: Union[LanguageTag, str, None] = None,
    ) -> ValidationOutcome:
        return self._validator.validate(first_name, last_name, language)

    def _compose_czech(self, person: PersonName, gender: GenderLabel, formal: bool, fallback: bool) -> _Salutation:
        if formal and person.last_name:
            if not gender.is_known:
                # Unknown gender takes the male honorific and declension
                declined = self._declension.decline(person.last_name, GenderLabel.MALE)
                text = f"{CZECH_DEAR['male']} {CZECH_HONORIFICS['male']} {declined}"
                return _Salutation(text, Confidence.MEDIUM, "czech_formal_default_gender")
            declined = self._declension.decline(person.last_name, gender)
            key = gender.value
            return _Salutation(f"{CZECH_DEAR[key]} {CZECH_HONORIFICS[key]} {declined}", Confidence.HIGH, "czech_formal")

        if person.first_name:
            key = "female" if gender is GenderLabel.FEMALE else "male"
            text = f"{CZECH_DEAR[key]} {person.first_name}"
            if formal:
                return _Salutation(text, Confidence.LOW, "czech_first_name_fallback")
            return _Salutation(text, Confidence.HIGH if gender.is_known else Confidence.MEDIUM, "czech_first_name")

        return _Salutation(CZECH_GENERIC_GREETING, Confidence.LOW, "czech_generic")

    def _compose_english(self, person: PersonName, gender: GenderLabel, formal: bool, fallback: bool) -> _Salutation:
        if formal and person.last_name:
            if gender.is_known:
                text = f"{ENGLISH_DEAR} {ENGLISH_HONORIFICS[gender.value]} {person.last_name}"
                return _Salutation(text, Confidence.HIGH, "english_formal")
            if fallback and person.first_name:
                text = f"{ENGLISH_DEAR} {person.first_name}"
                return _Salutation(text, Confidence.MEDIUM, "english_first_name_fallback")
            text = f"{ENGLISH_DEAR} {ENGLISH_NEUTRAL_HONORIFIC} {person.last_name}"
            return _Salutation(text, Confidence.MEDIUM, "english_neutral")

        if person.first_name:
            text = f"{ENGLISH_DEAR} {person.first_name}"
            if formal:
                return _Salutation(text, Confidence.LOW, "english_first_name_fallback")
            return _Salutation(text, Confidence.HIGH if gender.is_known else Confidence.MEDIUM, "english_first_name")

        return _Salutation(ENGLISH_GENERIC_GREETING, Confidence.LOW, "english_generic")


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════

# Global composer instance for module-level functions
_global_composer: Optional[GreetingComposer] = None
_global_composer_lock = threading.Lock()


def _get_global_composer() -> GreetingComposer:
    """Get or create the global composer instance; exactly one is ever published."""
    global _global_composer
    if _global_composer is None:
        with _global_composer_lock:
            if _global_composer is None:
                _global_composer = GreetingComposer()
    return _global_composer


def generate_greeting(
    first_name: Optional[str],
    last_name: Optional[str],
    language: Union[LanguageTag, str, None] = "english",
    formal: bool = True,
    fallback_to_first_name: bool = True,
) -> GreetingResult:
    """
    Module-level convenience function for greeting generation.

    Args:
        first_name: Guest's first name
        last_name: Guest's last name
        language: 'english' or 'czech'; anything else is treated as English
        formal: Use honorific + surname when possible
        fallback_to_first_name: For English with unknown gender, prefer "Dear <first name>"

    Returns:
        GreetingResult with a non-empty `text`
    """
    return _get_global_composer().compose(first_name, last_name, language, formal, fallback_to_first_name)


def generate_greeting_options(
    first_name: Optional[str], last_name: Optional[str], language: Union[LanguageTag, str, None] = "english"
) -> List[GreetingOption]:
    return _get_global_composer().compose_options(first_name, last_name, language)


def validate_greeting_inputs(
    first_name: Optional[str], last_name: Optional[str], language: Union[LanguageTag, str, None] = None
) -> ValidationOutcome:
    return _get_global_composer().validate(first_name, last_name, language)


def detect_gender(
    first_name: Optional[str], last_name: Optional[str] = "", language: Union[LanguageTag, str, None] = "english"
) -> GenderLabel:
    return _get_global_composer().classifier.classify(first_name, last_name, language)


def decline_surname(surname: str, gender: Union[GenderLabel, str, None]) -> str:
    return _get_global_composer().declension.decline(surname, gender)


def register_name(name: str, gender: Union[GenderLabel, str]) -> RegistrySnapshot:
    """Add a manual override to the global registry."""
    return _get_global_composer().registry.register(name, gender)
