"""Tests for loading and error handling components.

Streamlit-dependent rendering functions are tested with mocks.
"""

from unittest.mock import MagicMock, patch


class TestWithLoadingDecorator:
    """Tests for the with_loading decorator."""

    @patch("surfreport.dashboard.components.loading.st")
    def test_returns_original_value(self, mock_st):
        """Decorator does not change the return value."""
        from surfreport.dashboard.components.loading import with_loading

        @with_loading("Loading...")
        def add_numbers(a, b):
            return a + b

        assert add_numbers(2, 3) == 5

    @patch("surfreport.dashboard.components.loading.st")
    def test_calls_spinner_with_message(self, mock_st):
        """Decorator calls st.spinner with provided message."""
        from surfreport.dashboard.components.loading import with_loading

        @with_loading("Fetching tides...")
        def some_function():
            return 42

        some_function()
        mock_st.spinner.assert_called_once_with("Fetching tides...")

    @patch("surfreport.dashboard.components.loading.st")
    def test_preserves_function_metadata(self, mock_st):
        """Decorator preserves function name and docstring."""
        from surfreport.dashboard.components.loading import with_loading

        @with_loading()
        def documented_function():
            """This is a docstring."""
            return 1

        assert documented_function.__name__ == "documented_function"
        assert documented_function.__doc__ == "This is a docstring."


class TestWithErrorHandlingDecorator:
    """Tests for the with_error_handling decorator."""

    @patch("surfreport.dashboard.components.loading.st")
    def test_passes_through_value(self, mock_st):
        """Successful calls return normally."""
        from surfreport.dashboard.components.loading import with_error_handling

        @with_error_handling()
        def ok():
            return "fine"

        assert ok() == "fine"
        mock_st.error.assert_not_called()

    @patch("surfreport.dashboard.components.loading.st")
    def test_shows_error_and_returns_none(self, mock_st):
        """Exceptions are shown and turned into None."""
        from surfreport.dashboard.components.loading import with_error_handling

        @with_error_handling("Could not load surf data")
        def broken():
            raise RuntimeError("boom")

        assert broken() is None
        mock_st.error.assert_called_once_with("Could not load surf data: boom")


class TestRenderHelpers:
    """Tests for the render helpers."""

    def test_retry_button_clicked(self):
        """Clicking retry calls the callback."""
        from surfreport.dashboard.components.loading import render_retry_button

        container = MagicMock()
        container.button.return_value = True
        callback = MagicMock()

        assert render_retry_button("load", on_click=callback, container=container)
        callback.assert_called_once()
        assert container.button.call_args.kwargs["key"] == "retry_btn_load"

    def test_retry_button_not_clicked(self):
        """The callback only runs on click."""
        from surfreport.dashboard.components.loading import render_retry_button

        container = MagicMock()
        container.button.return_value = False
        callback = MagicMock()

        assert not render_retry_button("load", on_click=callback, container=container)
        callback.assert_not_called()

    def test_error_screen(self):
        """Error screen shows the message and a retry button."""
        from surfreport.dashboard.components.loading import render_error_screen

        container = MagicMock()
        container.button.return_value = False

        assert not render_error_screen("Could not load surf data.", container=container)
        container.error.assert_called_once_with("Could not load surf data.")
        container.button.assert_called_once()

    def test_error_screen_default_message(self):
        """A missing message falls back to a generic one."""
        from surfreport.dashboard.components.loading import render_error_screen

        container = MagicMock()
        container.button.return_value = False
        render_error_screen(None, container=container)
        container.error.assert_called_once_with("Something went wrong.")

    def test_empty_state_icons(self):
        """Icon selects the message style."""
        from surfreport.dashboard.components.loading import render_empty_state

        container = MagicMock()
        render_empty_state(container=container)
        container.info.assert_called_once_with("No forecast data available")

        render_empty_state("Careful", icon="warning", suggestion="Try later", container=container)
        container.warning.assert_called_once_with("Careful")
        container.caption.assert_called_once_with("Try later")

    def test_card_skeleton(self):
        """Skeleton is rendered as HTML with the given height."""
        from surfreport.dashboard.components.loading import render_card_skeleton

        container = MagicMock()
        render_card_skeleton(height=200, container=container)

        html = container.markdown.call_args[0][0]
        assert "height: 200px" in html
        assert container.markdown.call_args.kwargs["unsafe_allow_html"] is True
