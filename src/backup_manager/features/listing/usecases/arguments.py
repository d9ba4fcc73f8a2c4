"""src/backup_manager/features/listing/usecases/arguments.py
What: Collect and confirm the ``source``/``path`` inputs of a listing run.
Why: Guarantee a listing is only requested with complete, confirmed inputs.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from enum import Enum, auto
from pathlib import Path
from typing import Final, final

from backup_manager.features.listing.domain.models import (
    REQUIRED_ARGUMENTS,
    CollectedArguments,
    ResolvedArguments,
)
from backup_manager.features.listing.usecases.ports import InteractivePrompt
from backup_manager.features.storage.domain.errors import NoSourcesConfigured
from backup_manager.platform.logging import logger

DEFAULT_PATH: Final[str] = "/"
_PROMPTED_ARGUMENTS: Final[frozenset[str]] = frozenset({"source", "path"})


class ResolverState(Enum):
    """States of the collect/confirm loop."""

    CHECK_MISSING = auto()
    PROMPT = auto()
    CONFIRM = auto()
    RESET = auto()
    RESOLVED = auto()


@final
class ArgumentResolver:
    """Fill in missing listing arguments interactively and have them confirmed.

    The loop is ``CHECK_MISSING -> PROMPT -> CONFIRM``; a declined
    confirmation goes through ``RESET`` which clears every answer and asks
    all questions again. There is no retry limit: only the operator ends it.
    """

    def __init__(
        self,
        prompt: InteractivePrompt,
        sources_provider: Callable[[], Sequence[str]],
        required: Sequence[str] = REQUIRED_ARGUMENTS,
        *,
        config_path: Path | None = None,
    ) -> None:
        unknown = [name for name in required if name not in _PROMPTED_ARGUMENTS]
        if unknown:
            raise ValueError(f"No prompt available for required argument(s): {', '.join(unknown)}")

        self._prompt = prompt
        self._sources_provider = sources_provider
        self._required = tuple(required)
        self._config_path = config_path

    @staticmethod
    def detect_missing(
        required: Sequence[str],
        supplied: Mapping[str, str | None],
    ) -> list[str]:
        """Return the names of ``required`` without a non-empty supplied value."""

        return [name for name in required if not supplied.get(name)]

    def collect_missing(
        self,
        missing: Sequence[str],
        available_sources: Sequence[str],
        collected: Mapping[str, str | None] | None = None,
    ) -> CollectedArguments:
        """Prompt for each name in ``missing`` and return the merged answers.

        Args:
            missing: Names to ask for, in order.
            available_sources: Source names offered for ``source``; the first
                one is the default answer.
            collected: Answers gathered so far; left untouched.

        Raises:
            NoSourcesConfigured: When ``source`` must be asked but no source exists.
        """
        answers: CollectedArguments = dict(collected or {})
        for name in missing:
            if name == "source":
                answers["source"] = self._ask_source(available_sources)
            elif name == "path":
                answers["path"] = self._ask_path()
            else:
                logger.warning("No prompt registered for argument '%s'; leaving it unset", name)
        return answers

    def confirm_or_reset(
        self,
        args: Mapping[str, str | None],
        available_sources: Sequence[str] | None = None,
    ) -> ResolvedArguments:
        """Ask the operator to confirm ``args``, re-collecting all of them on refusal."""

        return self._run(ResolverState.CONFIRM, args, available_sources)

    def resolve(self, supplied: Mapping[str, str | None]) -> ResolvedArguments:
        """Run the full state machine starting from pre-supplied values."""

        return self._run(ResolverState.CHECK_MISSING, supplied, None)

    def _run(
        self,
        state: ResolverState,
        supplied: Mapping[str, str | None],
        available_sources: Sequence[str] | None,
    ) -> ResolvedArguments:
        answers: CollectedArguments = dict(supplied)
        missing: list[str] = []
        sources = list(available_sources) if available_sources is not None else None

        while state is not ResolverState.RESOLVED:
            if state is ResolverState.CHECK_MISSING:
                missing = self.detect_missing(self._required, answers)
                if missing:
                    self._display_missing(missing)
                    state = ResolverState.PROMPT
                else:
                    state = ResolverState.CONFIRM

            elif state is ResolverState.PROMPT:
                if "source" in missing and sources is None:
                    sources = list(self._sources_provider())
                answers = self.collect_missing(missing, sources or [], answers)
                state = ResolverState.CONFIRM

            elif state is ResolverState.CONFIRM:
                if self.detect_missing(self._required, answers):
                    state = ResolverState.CHECK_MISSING
                elif self._confirm(answers):
                    state = ResolverState.RESOLVED
                else:
                    state = ResolverState.RESET

            elif state is ResolverState.RESET:
                self._prompt.line()
                self._prompt.info("Answers have been reset and re-asking questions.")
                self._prompt.line()
                logger.debug("Operator rejected answers", extra={"listing_event": "arguments.reset"})
                answers = {name: None for name in self._required}
                missing = list(self._required)
                state = ResolverState.PROMPT

        return ResolvedArguments(
            source=answers.get("source") or "",
            path=answers.get("path") or "",
        )

    def _display_missing(self, missing: Sequence[str]) -> None:
        self._prompt.info("These arguments haven't been filled yet:")
        self._prompt.line(", ".join(missing))
        self._prompt.info("The following questions will fill these in for you.")
        self._prompt.line()

    def _ask_source(self, available_sources: Sequence[str]) -> str:
        if not available_sources:
            raise NoSourcesConfigured(self._config_path)

        self._prompt.info("Available sources:")
        self._prompt.line(", ".join(available_sources))
        default = available_sources[0]
        source = self._prompt.choose(
            "From which source do you want to list?", available_sources, default
        )
        self._prompt.line()
        return source

    def _ask_path(self) -> str:
        path = self._prompt.ask("From which path?", DEFAULT_PATH)
        self._prompt.line()
        return path

    def _confirm(self, answers: Mapping[str, str | None]) -> bool:
        self._prompt.info("You've filled in the following answers:")
        self._prompt.line(f"Source: {answers.get('source')}", style="yellow")
        self._prompt.line(f"Path: {answers.get('path')}", style="yellow")
        self._prompt.line()
        confirmed = self._prompt.confirm("Are these correct?")
        self._prompt.line()
        return confirmed


__all__ = ["ArgumentResolver", "DEFAULT_PATH", "ResolverState"]
