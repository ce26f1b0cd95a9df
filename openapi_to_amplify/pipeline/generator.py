"""
Pipeline generator.

Runs the phases of one translation: parse, resolve and translate
(analyzer), emit (backend), and always closes the output sink.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from .analyzer import IR, ResolutionContext, SchemaAnalyzer
from .backends import AmplifyBackend
from .config import CodeGeneratorConfig
from .schema_ast import SchemaParser
from .sink import FileSink, OutputSink, StringSink, check_output_path

logger = logging.getLogger(__name__)


class RunPhase(str, Enum):
    """Phase of a translation run.

    Within a run phases only move forward. Every analyze() starts a new run
    from PENDING.
    """

    PENDING = "pending"
    RESOLVING = "resolving"
    TRANSLATING = "translating"
    EMITTING = "emitting"
    CLOSED = "closed"


_PHASE_ORDER = list(RunPhase)


class PipelineGenerator:
    """Translates OpenAPI component schemas into an Amplify data schema module."""

    def __init__(self, schemas: Mapping[str, Any], config: CodeGeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            schemas: Mapping of component name to raw schema (components.schemas)
            config: Code generation configuration
        """
        self.schemas = schemas
        self.config = config or CodeGeneratorConfig()
        self.phase = RunPhase.PENDING
        self.context: ResolutionContext | None = None

    def analyze(self) -> IR:
        """Parse, resolve and translate the components into IR."""
        self.phase = RunPhase.PENDING
        self.context = ResolutionContext()
        analyzer = SchemaAnalyzer(SchemaParser().parse(self.schemas))
        self._enter(RunPhase.RESOLVING)
        analyzer.resolve(self.context, self.config.include)
        self._enter(RunPhase.TRANSLATING)
        return analyzer.translate(self.context)

    def write(self, sink: OutputSink) -> None:
        """
        Run one translation, writing the generated module to sink.

        The sink is closed exactly once, whether the run succeeds or fails.
        When the run fails, a failing final flush is logged and the run's
        own error propagates.

        Args:
            sink: Destination of the generated code
        """
        try:
            ir = self.analyze()
            self._enter(RunPhase.EMITTING)
            AmplifyBackend(self.config).emit(ir, sink)
        except BaseException:
            self._close(sink, failed=True)
            raise
        self._close(sink, failed=False)

    def generate(self) -> str:
        """Run one translation and return the generated module."""
        sink = StringSink()
        self.write(sink)
        return sink.getvalue()

    def generate_to_file(self, path: Path | str) -> Path:
        """
        Run one translation and write the generated module to path.

        Raises:
            UnsupportedOutputError: If path is not a TypeScript or JavaScript file
            OutputExistsError: If path has content and overwriting is off
        """
        path = check_output_path(path, overwrite=self.config.output.overwrite)
        self.write(FileSink(path))
        logger.info("Wrote %s", path)
        return path

    def _close(self, sink: OutputSink, failed: bool) -> None:
        try:
            sink.flush()
        except Exception:
            if not failed:
                raise
            logger.warning("Failed to flush output of a failed run", exc_info=True)
        finally:
            sink.close()
            self._enter(RunPhase.CLOSED)

    def _enter(self, phase: RunPhase) -> None:
        if _PHASE_ORDER.index(phase) <= _PHASE_ORDER.index(self.phase):
            raise RuntimeError(f"Run cannot move from {self.phase.value} to {phase.value}")
        logger.debug("Run phase: %s -> %s", self.phase.value, phase.value)
        self.phase = phase
