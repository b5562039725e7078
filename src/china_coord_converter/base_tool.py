"""
China Coordinate Converter - Tool Base Class
=============================================
Abstract base class for the converter's runnable tools.

Design Pattern:
    Template Method.  The public ``run()`` method defines a fixed
    pipeline (validate → process → report) that subclasses fill in by
    implementing ``validate_inputs`` and ``process``.

Usage::

    from china_coord_converter.base_tool import ConverterTool

    class MyTool(ConverterTool):
        def validate_inputs(self) -> None:
            ...
        def process(self) -> None:
            ...
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod

# Each module gets its own child logger under this root.
logger = logging.getLogger("china_coord_converter")


class ConverterTool(ABC):
    """Abstract base class for converter tools.

    Calling :meth:`run` executes the full pipeline in the correct order.

    Attributes:
        verbose: When ``True`` the tool logs DEBUG-level messages in
            addition to INFO/WARNING/ERROR.
    """

    def __init__(self, *, verbose: bool = False) -> None:
        self.verbose: bool = verbose

        self._configure_logging()

    # ------------------------------------------------------------------
    # Abstract interface
    # ------------------------------------------------------------------

    @abstractmethod
    def validate_inputs(self) -> None:
        """Validate all inputs before processing begins.

        Raises:
            InputValidationError: If any input is unusable.
        """

    @abstractmethod
    def process(self) -> None:
        """Execute the conversion.

        Called by :meth:`run` after :meth:`validate_inputs` has succeeded.
        Exceptions propagate up through :meth:`run`.
        """

    # ------------------------------------------------------------------
    # Template method
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Execute the full tool pipeline.

        1. :meth:`validate_inputs`
        2. :meth:`process`
        3. :meth:`_report_success`

        Raises:
            Any exception raised by ``validate_inputs`` or ``process``
            propagates unchanged.
        """
        logger.info("Starting %s", self.__class__.__name__)
        start = time.perf_counter()

        self.validate_inputs()
        self.process()

        elapsed = time.perf_counter() - start
        self._report_success(elapsed)

    # ------------------------------------------------------------------
    # Protected helpers
    # ------------------------------------------------------------------

    def _report_success(self, elapsed: float) -> None:
        logger.info(
            "%s completed in %.4fs",
            self.__class__.__name__,
            elapsed,
        )

    def _configure_logging(self) -> None:
        """Attach a console handler to the package logger if it has none.

        Uses DEBUG level when ``self.verbose`` is ``True``, otherwise INFO.
        """
        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                fmt="[%(asctime)s] %(levelname)-8s %(name)s - %(message)s",
                datefmt="%H:%M:%S",
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        logger.setLevel(logging.DEBUG if self.verbose else logging.INFO)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(verbose={self.verbose!r})"
