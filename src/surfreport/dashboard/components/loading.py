"""Loading, error and empty states for the surf report dashboard."""

import logging
from functools import wraps
from typing import Callable, Optional, TypeVar

import streamlit as st

T = TypeVar('T')

logger = logging.getLogger(__name__)


def with_loading(message: str = "Loading surf report..."):
    """Decorator to show a spinner while the function runs.

    Example:
        >>> @with_loading("Fetching tides...")
        ... def fetch():
        ...     return pipeline.run()
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            with st.spinner(message):
                return func(*args, **kwargs)
        return wrapper
    return decorator


def with_error_handling(fallback_message: str = "Something went wrong."):
    """Decorator to catch errors, show them, and return None instead.

    Args:
        fallback_message: Message shown before the error text
    """
    def decorator(func: Callable[..., T]) -> Callable[..., Optional[T]]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Optional[T]:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{fallback_message}: {e}")
                st.error(f"{fallback_message}: {e}")
                return None
        return wrapper
    return decorator


def render_card_skeleton(height: int = 320, container=None) -> None:
    """Render a placeholder card while the report loads."""
    target = container if container is not None else st
    target.markdown(
        f"""
        <div class="day-card skeleton" style="
            background: #f5f5f5;
            height: {height}px;
            border-radius: 12px;
            padding: 20px;
            display: flex;
            flex-direction: column;
            gap: 10px;
        ">
            <div style="height: 24px; width: 50%; background: #e0e0e0; border-radius: 4px;"></div>
            <div style="height: 48px; width: 30%; background: #e8e8e8; border-radius: 4px;"></div>
            <div style="height: 16px; width: 70%; background: #f0f0f0; border-radius: 4px;"></div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_retry_button(
    key: str,
    on_click: Optional[Callable] = None,
    label: str = "Retry",
    container=None,
) -> bool:
    """Render a retry button. Returns True if clicked."""
    target = container if container is not None else st

    clicked = target.button(f"🔄 {label}", key=f"retry_btn_{key}")

    if clicked and on_click is not None:
        on_click()

    return clicked


def render_error_screen(
    message: Optional[str],
    key: str = "load",
    on_retry: Optional[Callable] = None,
    container=None,
) -> bool:
    """Render the total-failure screen with a retry button.

    Returns:
        True if retry was clicked
    """
    target = container if container is not None else st

    target.error(message or "Something went wrong.")
    return render_retry_button(key, on_click=on_retry, container=target)


def render_empty_state(
    message: str = "No forecast data available",
    icon: str = "info",
    suggestion: Optional[str] = None,
    container=None,
) -> None:
    """Render an empty-state placeholder.

    Args:
        message: Main message to display
        icon: "info", "warning" or "error"
        suggestion: Optional caption below the message
        container: Streamlit container to render in
    """
    target = container if container is not None else st

    if icon == "warning":
        target.warning(message)
    elif icon == "error":
        target.error(message)
    else:
        target.info(message)

    if suggestion:
        target.caption(suggestion)
