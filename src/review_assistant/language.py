# src/review_assistant/language.py
"""
Filename based programming language detection.

Maps well-known file names and file extensions to the human-readable
language labels used in review prompts.
"""
from abc import ABC, abstractmethod
from pathlib import PurePosixPath

from review_assistant.errors import LanguageNotFoundError


FILENAME_TO_LANGUAGE: dict[str, str] = {
    "dockerfile": "Dockerfile",
    "containerfile": "Dockerfile",
    "makefile": "Makefile",
    "gnumakefile": "Makefile",
    "cmakelists.txt": "CMake",
    "gemfile": "Ruby",
    "rakefile": "Ruby",
    "podfile": "Ruby",
    "vagrantfile": "Ruby",
    "jenkinsfile": "Groovy",
    "build.gradle": "Groovy",
    "pipfile": "TOML",
}

EXTENSION_TO_LANGUAGE: dict[str, str] = {
    # Python
    ".py": "Python",
    ".pyw": "Python",
    ".pyi": "Python",
    ".pyx": "Cython",

    # Java/JVM
    ".java": "Java",
    ".kt": "Kotlin",
    ".kts": "Kotlin",
    ".scala": "Scala",
    ".groovy": "Groovy",
    ".gradle": "Groovy",
    ".clj": "Clojure",

    # JavaScript/TypeScript
    ".js": "JavaScript",
    ".jsx": "JavaScript",
    ".mjs": "JavaScript",
    ".cjs": "JavaScript",
    ".ts": "TypeScript",
    ".tsx": "TSX",
    ".mts": "TypeScript",
    ".cts": "TypeScript",
    ".vue": "Vue",
    ".svelte": "Svelte",

    # Systems languages
    ".go": "Go",
    ".rs": "Rust",
    ".c": "C",
    ".h": "C",
    ".cpp": "C++",
    ".cc": "C++",
    ".cxx": "C++",
    ".hpp": "C++",
    ".hxx": "C++",
    ".cs": "C#",
    ".fs": "F#",
    ".swift": "Swift",
    ".m": "Objective-C",
    ".mm": "Objective-C++",
    ".zig": "Zig",
    ".dart": "Dart",

    # Web/Scripting
    ".php": "PHP",
    ".rb": "Ruby",
    ".erb": "HTML+ERB",
    ".lua": "Lua",
    ".pl": "Perl",
    ".pm": "Perl",
    ".r": "R",
    ".jl": "Julia",
    ".ex": "Elixir",
    ".exs": "Elixir",
    ".erl": "Erlang",
    ".hs": "Haskell",
    ".ml": "OCaml",
    ".sh": "Shell",
    ".bash": "Shell",
    ".zsh": "Shell",
    ".ps1": "PowerShell",
    ".sql": "SQL",

    # Markup/Config
    ".html": "HTML",
    ".htm": "HTML",
    ".css": "CSS",
    ".scss": "SCSS",
    ".less": "Less",
    ".md": "Markdown",
    ".markdown": "Markdown",
    ".rst": "reStructuredText",
    ".tex": "TeX",
    ".json": "JSON",
    ".yaml": "YAML",
    ".yml": "YAML",
    ".toml": "TOML",
    ".xml": "XML",
    ".ini": "INI",
    ".proto": "Protocol Buffer",
    ".graphql": "GraphQL",
    ".tf": "HCL",
    ".sol": "Solidity",
}


class LanguageDetector(ABC):
    @abstractmethod
    async def detect_language(self, filename: str) -> str:
        """Return the language label for a filename or raise LanguageNotFoundError."""
        pass


class ExtensionLanguageDetector(LanguageDetector):
    def __init__(self, extra: dict[str, str] | None = None):
        self.filenames = dict(FILENAME_TO_LANGUAGE)
        self.extensions = dict(EXTENSION_TO_LANGUAGE)
        for key, language in (extra or {}).items():
            key = key.lower()
            if key.startswith("."):
                self.extensions[key] = language
            else:
                self.filenames[key] = language

    async def detect_language(self, filename: str) -> str:
        language = self.lookup(filename)
        if language is None:
            raise LanguageNotFoundError(filename)
        return language

    def lookup(self, filename: str) -> str | None:
        path = PurePosixPath(filename)
        name = path.name.lower()
        if name in self.filenames:
            return self.filenames[name]
        return self.extensions.get(path.suffix.lower())
