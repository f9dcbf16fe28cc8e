"""Separator hierarchies for code-aware recursive splitting."""

from enum import StrEnum

from ragsplit.config.models import DEFAULT_SEPARATORS


class Language(StrEnum):
    PYTHON = "python"
    JAVA = "java"
    JS = "js"
    TS = "ts"
    GO = "go"
    RUST = "rust"
    CPP = "cpp"
    C = "c"
    RUBY = "ruby"
    PHP = "php"
    MARKDOWN = "markdown"
    HTML = "html"
    LATEX = "latex"
    CSHARP = "csharp"
    COBOL = "cobol"
    KOTLIN = "kotlin"
    SCALA = "scala"
    SWIFT = "swift"
    PROTO = "proto"
    RST = "rst"
    SOL = "sol"
    LUA = "lua"
    HASKELL = "haskell"
    ELIXIR = "elixir"
    POWERSHELL = "powershell"


_JS_SEPARATORS = (
    "\nfunction ", "\nconst ", "\nlet ", "\nvar ", "\nclass ",
    "\nif ", "\nfor ", "\nwhile ", "\nswitch ", "\ncase ", "\ndefault ",
    "\n\n", "\n", " ", "",
)

_LANGUAGE_SEPARATORS: dict[Language, tuple[str, ...]] = {
    Language.PYTHON: (
        "\nclass ", "\ndef ", "\n\tdef ",
        "\n\n", "\n", " ", "",
    ),
    Language.JAVA: (
        "\nclass ", "\npublic ", "\nprotected ", "\nprivate ", "\nstatic ",
        "\nif ", "\nfor ", "\nwhile ", "\nswitch ", "\ncase ",
        "\n\n", "\n", " ", "",
    ),
    Language.JS: _JS_SEPARATORS,
    Language.TS: _JS_SEPARATORS,
}


def get_separators_for_language(language: Language | str) -> tuple[str, ...]:
    """Separator hierarchy for source code in ``language``.

    Languages without a dedicated hierarchy use the generic one.

    Raises:
        ValueError: If ``language`` is not a known Language value
    """
    return _LANGUAGE_SEPARATORS.get(Language(language), DEFAULT_SEPARATORS)
