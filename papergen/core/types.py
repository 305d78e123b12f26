from __future__ import annotations

from dataclasses import dataclass

DEFAULT_DURATION_MINUTES = 60


@dataclass(slots=True)
class GenerationRequest:
    subject: str
    chapter: str
    duration: int = DEFAULT_DURATION_MINUTES


@dataclass(frozen=True, slots=True)
class PromptPair:
    instruction_block: str
    request_block: str


@dataclass(frozen=True, slots=True)
class GenerationOptions:
    model: str
    use_search: bool = True


@dataclass(slots=True)
class GenerationResult:
    text: str
