from osloveni.greetings import (
    LanguageTag,
    GenderLabel,
    Confidence,
    PersonName,
    DeclensionRule,
    GreetingMetadata,
    GreetingResult,
    GreetingOption,
    ValidationOutcome,
    GreetingConfig,
    RegistrySnapshot,
    NameRegistry,
    GenderClassifier,
    SurnameDeclensionEngine,
    InputValidator,
    GreetingComposer,
    czech_honorific,
    czech_surname_gender,
    detect_language_from_greeting,
    is_likely_czech_surname,
    preserve_capitalization,
    with_trailing_comma,
    fallback_greeting,
    generate_greeting,
    generate_greeting_options,
    validate_greeting_inputs,
    detect_gender,
    decline_surname,
    register_name,
)

__version__ = "0.1.0"
