#!/usr/bin/env python3
"""
Base Checker Contract v1.0.0
============================
Defines the interface the spelling and grammar checkers implement.

Checkers are flag-only: they report problems with character offsets
into SegmentedText.original_text and never rewrite the text.
"""

from typing import List, Dict, Any

from config_logging import get_logger
from text_segmentation import SegmentedText

__version__ = "1.0.0"

logger = get_logger('checkers')


class BaseChecker:
    """
    Base class for text checkers.

    Subclasses must implement:
    - check() returning a result object with an ``errors`` list
    - empty_result() returning the result used when checking is skipped
    - CHECKER_NAME and CHECKER_VERSION class attributes
    """

    CHECKER_NAME = "Base"
    CHECKER_VERSION = "1.0.0"

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._errors: List[str] = []

    def check(self, segmented: SegmentedText, **kwargs):
        """
        Run the check on segmented text.

        Args:
            segmented: Output of text_segmentation.segment_text()

        Returns:
            Checker-specific result with an ``errors`` list
        """
        raise NotImplementedError("Subclasses must implement check()")

    def empty_result(self):
        raise NotImplementedError("Subclasses must implement empty_result()")

    def safe_check(self, segmented: SegmentedText, **kwargs):
        """Run check, recording any failure instead of propagating it."""
        if not self.enabled:
            return self.empty_result()
        try:
            return self.check(segmented, **kwargs)
        except Exception as e:
            message = f"{self.CHECKER_NAME} error: {e}"
            logger.exception(message, checker=self.CHECKER_NAME)
            self._errors.append(message)
            return self.empty_result()

    def describe(self) -> Dict[str, Any]:
        """Name, version and enabled flag, as reported by the health endpoint."""
        return {
            'checker': self.CHECKER_NAME,
            'version': self.CHECKER_VERSION,
            'enabled': self.enabled,
        }

    def clear_errors(self):
        """Clear accumulated errors."""
        self._errors = []

    def get_errors(self) -> List[str]:
        """Get accumulated errors."""
        return self._errors.copy()
