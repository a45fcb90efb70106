"""
DictationAssist Tests Package
=============================
Test suite for the dictation core and its HTTP API.

Run all tests: python3 -m pytest tests/ -v
Run specific: python3 -m pytest tests/test_edit_executor.py -v
"""

__version__ = "1.0.0"
