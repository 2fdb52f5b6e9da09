"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Sample designs shared by the renderer, generator and CLI tests
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
from dotenv import load_dotenv

if TYPE_CHECKING:
    from screenforge.ir import Screen

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Common Test Fixtures
# =============================================================================


@pytest.fixture
def sample_screen() -> Screen:
    """Create a login screen exercising text, input and navigation.

    Returns:
        A Screen with a title card, two labeled inputs and a button that
        navigates to ``home``.
    """
    from screenforge.ir import Screen, create_element
    from screenforge.schema import ComponentType

    card = create_element(ComponentType.CARD, 30, 20, element_id="header")
    card.properties.update(title="Welcome Back", showImage=False)

    email = create_element(
        ComponentType.INPUT_WITH_LABEL, 20, 240, element_id="email"
    )
    email.properties.update(label="Email", type="email")

    password = create_element(
        ComponentType.INPUT_WITH_LABEL, 20, 320, element_id="password"
    )
    password.properties.update(label="Password", type="password")

    submit = create_element(ComponentType.BUTTON, 120, 420, element_id="submit")
    submit.properties.update(text="Login", navigateTo="home")

    return Screen(
        id="login",
        name="Login",
        elements=[card, email, password, submit],
    )


@pytest.fixture
def sample_screens(sample_screen: Screen) -> list[Screen]:
    """Create a two-screen design with navigation between them.

    Returns:
        ``[login, home]`` where the login button targets ``home``.
    """
    from screenforge.ir import Screen, create_element
    from screenforge.schema import ComponentType

    table = create_element(ComponentType.DYNAMIC_TABLE, 5, 100, element_id="users")
    back = create_element(ComponentType.BUTTON, 20, 560, element_id="back")
    back.properties.update(text="Log out", navigateTo="login", variant="outline")

    return [sample_screen, Screen(id="home", name="Home", elements=[table, back])]


@pytest.fixture
def interactive_screen() -> Screen:
    """Create a settings screen with stateful and stateless controls.

    Element order matters: indexes 0 and 2 are interactive, index 1 is not.

    Returns:
        A Screen with an interactive switch, a plain checkbox and an
        interactive dropdown.
    """
    from screenforge.ir import Screen, create_element
    from screenforge.schema import ComponentType

    notifications = create_element(
        ComponentType.SWITCH, 20, 40, element_id="notify"
    )
    notifications.properties.update(interactive=True, value=True, label="Notify")

    terms = create_element(ComponentType.CHECKBOX, 20, 100, element_id="terms")
    terms.properties.update(label="Accept terms")

    theme = create_element(ComponentType.DROPDOWN, 20, 160, element_id="theme")
    theme.properties.update(
        interactive=True,
        value="option2",
        options=(
            '[{"label":"Light","value":"option1"},'
            '{"label":"Dark","value":"option2"}]'
        ),
    )

    return Screen(
        id="settings", name="Settings", elements=[notifications, terms, theme]
    )


@pytest.fixture
def generated_elements() -> list[dict[str, Any]]:
    """Raw element records as a generative model might return them.

    Returns:
        A list mixing well-formed, sloppy and invalid records.
    """
    return [
        {
            "type": "chatMessage",
            "x": 20,
            "y": 40,
            "width": 280,
            "height": 80,
            "properties": {"text": "Hi there!", "isUser": "false"},
        },
        {
            "type": "chatInput",
            "x": "10",
            "y": 600,
            "width": 400,
            "height": 50,
            "children": [],
        },
        {
            "type": "dropdown",
            "properties": {
                "options": [
                    {"label": "Small", "value": "s"},
                    {"label": "Large", "value": "l"},
                ]
            },
        },
        {"type": "slider", "x": 5, "y": 5},
    ]
