"""Ordered processing steps for binding code generation.

Generation runs in rounds. Each round hands every registered step the
elements discovered so far; a step keeps being invoked until it reports that
it is done. Once the final round arrives every step gets a chance to flush
the output it accumulated.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, Field

from bindgen.writer import SourceWriter

logger = logging.getLogger(__name__)


class BuildInfo(BaseModel):
    """Per-build metadata that must be present before any step runs.

    Attributes:
        build_id: Identifier of the current build.
        module_package: Package of the module being compiled.
        enable_debug_logs: Emit debug logging while processing.
    """

    build_id: str = Field(min_length=1)
    module_package: str = ""
    enable_debug_logs: bool = False


@dataclass(slots=True)
class Round:
    """Inputs to a single processing round."""

    elements: Sequence[Any] = field(default_factory=tuple)
    build_info: Optional[BuildInfo] = None
    processing_over: bool = False


class ProcessingStep(ABC):
    """One unit of generation work, run by `BindingProcessor` in order."""

    def __init__(self) -> None:
        self.done = False
        self.writer: Optional[SourceWriter] = None

    def run_step(self, round_: Round) -> bool:
        """Run `on_handle_step` unless the step already finished."""
        if self.done:
            return True
        self.done = bool(self.on_handle_step(round_))
        return self.done

    @abstractmethod
    def on_handle_step(self, round_: Round) -> bool:
        """Handle one round.

        Returns:
            bool: True if the step is done and must not be invoked again.
        """

    @abstractmethod
    def on_processing_over(self, round_: Round) -> None:
        """Called after the final round; emit any output held back until now."""


class BindingProcessor:
    """Dispatch rounds to processing steps in a fixed order.

    Args:
        steps: Steps to run, in execution order.
        writer: Sink handed to every step for its generated sources.
    """

    def __init__(self, steps: Sequence[ProcessingStep], writer: SourceWriter) -> None:
        self.steps: List[ProcessingStep] = list(steps)
        self.writer = writer
        for step in self.steps:
            step.writer = writer

    def process(self, round_: Round) -> bool:
        """Run every step for `round_`.

        Returns:
            bool: True when all steps are done. False, without running any
            step, when the round carries no build info.
        """
        build_info = round_.build_info
        if build_info is None:
            logger.debug("No build info in round; skipping %d steps", len(self.steps))
            return False

        if build_info.enable_debug_logs:
            logger.debug(
                "Build %s: processing %d elements", build_info.build_id, len(round_.elements)
            )

        done = True
        for step in self.steps:
            done = step.run_step(round_) and done

        if round_.processing_over:
            for step in self.steps:
                step.on_processing_over(round_)
        return done


__all__ = ["BindingProcessor", "BuildInfo", "ProcessingStep", "Round"]
