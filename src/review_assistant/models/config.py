from enum import Enum


class OutputFormat(str, Enum):
    STRUCTURED = "structured"
    FREEFORM = "freeform"
