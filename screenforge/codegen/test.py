"""Unit tests for the Flutter code generator."""

import pytest

from screenforge.ir import Screen, create_element
from screenforge.schema import ComponentType

from .lib import (
    EMPTY_BODY_MARKER,
    FlutterGenerator,
    assign_class_names,
    class_name,
    dart_double,
    dart_icon,
    dart_string,
    generate,
    generate_with_warnings,
)


def _screen_with(component_type: ComponentType, **properties) -> Screen:
    element = create_element(component_type, 20, 20, element_id="el")
    element.properties.update(properties)
    return Screen(id="only", name="Only", elements=[element])


def _every_type_screen() -> Screen:
    elements = [
        create_element(component_type, 0, 0, element_id=f"e{i}")
        for i, component_type in enumerate(ComponentType)
    ]
    return Screen(id="all", name="All Types", elements=elements)


class TestDartLiterals:
    """Tests for Dart literal helpers."""

    @pytest.mark.unit
    def test_plain_string(self):
        assert dart_string("Login") == "'Login'"

    @pytest.mark.unit
    def test_escapes(self):
        """Quotes, backslashes, interpolation and newlines are escaped."""
        assert dart_string("It's $5\n") == "'It\\'s \\$5\\n'"
        assert dart_string("C:\\temp") == "'C:\\\\temp'"

    @pytest.mark.unit
    def test_none_is_empty(self):
        assert dart_string(None) == "''"

    @pytest.mark.unit
    def test_double(self):
        assert dart_double(20) == "20.0"
        assert dart_double(12.345) == "12.3"

    @pytest.mark.unit
    def test_icon(self):
        assert dart_icon("home") == "Icons.home"


class TestClassNames:
    """Tests for screen class naming."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Home", "HomeScreen"),
            ("user settings", "UserSettingsScreen"),
            ("Sign-in / Up!", "SignInUpScreen"),
            ("2fa", "Screen2faScreen"),
            ("", "UntitledScreen"),
            ("***", "UntitledScreen"),
        ],
    )
    def test_class_name(self, name, expected):
        assert class_name(name) == expected

    @pytest.mark.unit
    def test_duplicates_get_suffixes(self):
        screens = [
            Screen(id="a", name="Home"),
            Screen(id="b", name="Home"),
            Screen(id="c", name="home"),
        ]
        assert assign_class_names(screens) == [
            "HomeScreen",
            "HomeScreen2",
            "HomeScreen3",
        ]


class TestApplicationShell:
    """Tests for the generated app, routes and drawer."""

    @pytest.mark.unit
    def test_routes_and_drawer_order(self):
        """Two screens give two routes and a drawer listing both in order."""
        screens = [
            Screen(id="home", name="Home"),
            Screen(id="settings", name="Settings"),
        ]
        code = generate(screens)

        assert code.count("(context) => const") == 2
        assert "'/home': (context) => const HomeScreen()," in code
        assert "'/settings': (context) => const SettingsScreen()," in code
        assert "initialRoute: '/home'," in code

        sidebar = code[code.index("class AppSidebar") : code.index("class HomeScreen")]
        assert sidebar.index("Text('Home')") < sidebar.index("Text('Settings')")
        assert "pushReplacementNamed('/settings')" in sidebar

    @pytest.mark.unit
    def test_light_theme(self):
        code = generate([Screen(id="home", name="Home")])
        assert "brightness: Brightness.light," in code
        assert "foregroundColor: Colors.black," in code

    @pytest.mark.unit
    def test_dark_theme(self):
        code = generate([Screen(id="home", name="Home")], dark_mode=True)
        assert "brightness: Brightness.dark," in code
        assert "Color(0xFF121212)" in code
        assert "Color(0xFF1E1E1E)" in code

    @pytest.mark.unit
    def test_app_title_escaped(self):
        code = generate([Screen(id="home", name="Home")], app_title="Bob's App")
        assert "title: 'Bob\\'s App'," in code

    @pytest.mark.unit
    def test_no_screens(self):
        code = generate([])
        assert "home: const Scaffold()," in code
        assert "initialRoute" not in code

    @pytest.mark.unit
    def test_deterministic(self, sample_screens):
        assert generate(sample_screens) == generate(sample_screens)

    @pytest.mark.unit
    def test_brackets_balanced(self):
        """Every component type nests into well-formed brackets."""
        code = generate([_every_type_screen()])
        for opening, closing in ("()", "[]", "{}"):
            assert code.count(opening) == code.count(closing)


class TestScreens:
    """Tests for per-screen widgets."""

    @pytest.mark.unit
    def test_empty_screen(self):
        """A screen without elements still produces a complete class."""
        code = generate([Screen(id="empty", name="Empty")])
        assert "class EmptyScreen extends StatefulWidget {" in code
        assert "class _EmptyScreenState extends State<EmptyScreen> {" in code
        assert EMPTY_BODY_MARKER in code

    @pytest.mark.unit
    def test_positioned_geometry(self, sample_screen):
        code = generate([sample_screen])
        assert code.count("Positioned(") == 4
        assert "left: 120.0,\n" in code
        assert "top: 420.0,\n" in code

    @pytest.mark.unit
    def test_state_fields(self, interactive_screen):
        """Only interactive elements get state, named by original index."""
        code = generate([interactive_screen])
        assert "bool _switch0 = true;" in code
        assert "_checkbox1" not in code
        assert "String? _dropdown2 = 'option2';" in code
        assert "value: _switch0," in code
        assert "_dropdown2 = newValue;" in code

    @pytest.mark.unit
    def test_dropdown_value_not_in_options_is_null(self):
        screen = _screen_with(ComponentType.DROPDOWN, interactive=True, value="nope")
        code = generate([screen])
        assert "String? _dropdown0 = null;" in code

    @pytest.mark.unit
    def test_non_interactive_switch_uses_literal(self):
        code = generate([_screen_with(ComponentType.SWITCH, value=True)])
        assert "value: true," in code
        assert "_switch0" not in code

    @pytest.mark.unit
    def test_screen_name_escaped(self):
        code = generate([Screen(id="bob", name="Bob's")])
        assert "title: Text('Bob\\'s')," in code
        assert "class BobSScreen" in code


class TestNavigation:
    """Tests for button navigation."""

    @pytest.mark.unit
    def test_button_navigates(self):
        """A button with a target pushes the target's route."""
        login = _screen_with(
            ComponentType.BUTTON, text="Login", color="#2196F3", navigateTo="screen-2"
        )
        target = Screen(id="screen-2", name="Second")
        result = generate_with_warnings([login, target])

        assert "'Login'," in result.code
        assert "Navigator.of(context).pushNamed('/screen-2');" in result.code
        assert "'/screen-2': (context) => const SecondScreen()," in result.code
        assert not result.has_warnings

    @pytest.mark.unit
    def test_unresolved_target_warns(self):
        screen = _screen_with(ComponentType.BUTTON, navigateTo="nowhere")
        result = FlutterGenerator().generate_with_warnings([screen])

        assert "pushNamed('/nowhere')" in result.code
        assert result.has_warnings
        warning = result.warnings[0]
        assert warning.element_id == "el"
        assert warning.value == "nowhere"

    @pytest.mark.unit
    def test_no_target_no_navigation(self):
        code = generate([_screen_with(ComponentType.BUTTON)])
        assert "pushNamed" not in code
        assert "onPressed: () {}," in code


class TestWidgets:
    """Tests for per-type widget snippets."""

    @pytest.mark.unit
    def test_button_contrast(self):
        blue = generate([_screen_with(ComponentType.BUTTON, color="#2196F3")])
        yellow = generate([_screen_with(ComponentType.BUTTON, color="#FFEB3B")])
        assert "foregroundColor: Color(0xFFFFFFFF)," in blue
        assert "foregroundColor: Color(0xFF000000)," in yellow

    @pytest.mark.unit
    def test_outline_button(self):
        code = generate([_screen_with(ComponentType.BUTTON, variant="outline")])
        assert "OutlinedButton(" in code

    @pytest.mark.unit
    def test_row_alignment(self):
        screen = _screen_with(
            ComponentType.ROW,
            mainAxisAlignment="space-between",
            crossAxisAlignment="stretch",
        )
        code = generate([screen])
        assert "mainAxisAlignment: MainAxisAlignment.spaceBetween," in code
        assert "crossAxisAlignment: CrossAxisAlignment.stretch," in code

    @pytest.mark.unit
    def test_stack_alignment(self):
        code = generate([_screen_with(ComponentType.STACK, alignment="bottomRight")])
        assert "alignment: Alignment.bottomRight," in code

    @pytest.mark.unit
    def test_table_fallback(self):
        screen = _screen_with(ComponentType.DYNAMIC_TABLE, data="not json")
        code = generate([screen])
        assert "DataCell(Text('John Doe'))," in code
        assert "DataColumn(" in code

    @pytest.mark.unit
    def test_dropdown_items(self):
        screen = _screen_with(
            ComponentType.DROPDOWN,
            options='[{"label":"Red","value":"r"},{"label":"Blue","value":"b"}]',
        )
        code = generate([screen])
        assert "value: 'r'," in code
        assert "child: Text('Blue')," in code

    @pytest.mark.unit
    def test_invalid_icon_name_falls_back(self):
        code = generate([_screen_with(ComponentType.ICON, name="Arrow Back")])
        assert "Icons.star," in code
        assert "Arrow Back" not in code

    @pytest.mark.unit
    def test_invalid_list_icon_falls_back(self):
        screen = _screen_with(
            ComponentType.LIST, data='[{"title":"A","icon":"Not-An-Icon"}]'
        )
        code = generate([screen])
        assert "leading: Icon(Icons.circle, color: Colors.blue)," in code
        assert "Not-An-Icon" not in code

    @pytest.mark.unit
    def test_chat_bubble_ignores_theme(self):
        """Bubble colors are the same in both themes."""
        screen = _screen_with(ComponentType.CHAT_MESSAGE, isUser=False)
        for dark_mode in (False, True):
            code = generate([screen], dark_mode=dark_mode)
            assert "color: Color(0xFFE5E7EB)," in code
            assert "TextStyle(color: Color(0xFF1F2937))" in code

    @pytest.mark.unit
    def test_password_input(self, sample_screen):
        code = generate([sample_screen])
        assert "obscureText: true," in code
        assert "keyboardType: TextInputType.emailAddress," in code

    @pytest.mark.unit
    @pytest.mark.parametrize("component_type", list(ComponentType))
    def test_every_type_generates(self, component_type):
        widget = FlutterGenerator().widget(create_element(component_type, 0, 0))
        assert widget
        assert widget[0].endswith("(")
