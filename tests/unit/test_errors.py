"""
Error handling unit tests
"""

import pytest

from touchpos.core.errors import (
    ErrorSeverity,
    TouchPosError,
    InitializationError,
    NavigationError,
    ThemeLoadError,
    CartError,
    ScreenNotFoundError,
    ScreenError,
    Result,
)


class TestErrorSeverity:

    def test_severity_values(self):
        assert ErrorSeverity.WARNING.value == "warning"
        assert ErrorSeverity.ERROR.value == "error"
        assert ErrorSeverity.CRITICAL.value == "critical"


class TestTouchPosError:

    def test_error_str(self):
        err = TouchPosError(message="Test error", code="TEST")
        assert "[TEST] Test error" in str(err)

    def test_error_with_context(self):
        err = TouchPosError(message="Failed", context={"key": "value"})
        assert err.context == {"key": "value"}


class TestSpecificErrors:

    def test_initialization_error_is_critical(self):
        err = InitializationError(message="storage down")
        assert err.code == "INIT_ERROR"
        assert err.severity == ErrorSeverity.CRITICAL

    def test_navigation_error_code(self):
        assert NavigationError(message="x").code == "NAVIGATION_ERROR"

    def test_theme_error_code(self):
        assert ThemeLoadError(message="x").code == "THEME_LOAD_ERROR"

    def test_cart_error_is_warning(self):
        assert CartError(message="x").severity == ErrorSeverity.WARNING

    def test_screen_not_found_is_screen_error(self):
        err = ScreenNotFoundError(message="Screen not found: foo")
        assert isinstance(err, ScreenError)
        assert err.code == "SCREEN_NOT_FOUND"


class TestResult:

    def test_ok_result(self):
        result = Result.ok(42)
        assert result.is_ok() is True
        assert result.is_err() is False
        assert result.error is None
        assert result.unwrap() == 42

    def test_err_result(self):
        err = TouchPosError(message="Failed")
        result = Result.err(err)
        assert result.is_ok() is False
        assert result.error is err

        with pytest.raises(TouchPosError):
            result.unwrap()

    def test_unwrap_or_returns_default(self):
        result = Result.err(TouchPosError(message="Failed"))
        assert result.unwrap_or("default") == "default"

    def test_map_transforms_ok(self):
        assert Result.ok(5).map(lambda x: x * 2).unwrap() == 10

    def test_map_preserves_err(self):
        result = Result.err(TouchPosError(message="Failed"))
        assert result.map(lambda x: x * 2).is_ok() is False
