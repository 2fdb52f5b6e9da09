"""Flutter source generator for screen designs.

Turns a list of screens into a single, self-contained Dart source file: a
``MaterialApp`` with one named route per screen, a shared navigation drawer
and one ``StatefulWidget`` per screen whose body is a ``Stack`` of
``Positioned`` widgets at the elements' literal canvas geometry.

Widget snippets are built as lists of lines with relative indentation and
nested into their parents, so the emitted code is consistently indented.
Structured sub-properties, alignment keywords and colors are read through
``screenforge.interpret``, the same rules the preview renderer uses.

Generation is pure and deterministic: the same screens always produce the
same text. Interactive switches, checkboxes and dropdowns get state fields
named after their index in the screen's element list.
"""

import re
from dataclasses import dataclass, field
from typing import Any

from screenforge.color import contrast_color, hex_to_argb
from screenforge.core.log import get_logger
from screenforge.interpret import (
    LIST_ITEM_ICON,
    OTHER_AVATAR_COLOR,
    OTHER_BUBBLE_COLOR,
    OTHER_BUBBLE_TEXT,
    SAMPLE_TIMESTAMP,
    SECONDARY_BUTTON_COLOR,
    SECONDARY_BUTTON_TEXT,
    USER_AVATAR_COLOR,
    USER_BUBBLE_COLOR,
    USER_BUBBLE_TEXT,
    CrossAxis,
    MainAxis,
    StackAlignment,
    cell_text,
    parse_cross_axis,
    parse_list_items,
    parse_main_axis,
    parse_options,
    parse_stack_alignment,
    parse_table,
    property_color,
    resolve_icon_name,
)
from screenforge.ir import DesignElement, Screen
from screenforge.schema import ComponentType, is_interactive_type

logger = get_logger(__name__)

DEFAULT_APP_TITLE = "Flutter UI App"
EMPTY_BODY_MARKER = "// No elements added yet"

_INDENT = "  "

_MAIN_AXIS = {
    MainAxis.START: "MainAxisAlignment.start",
    MainAxis.CENTER: "MainAxisAlignment.center",
    MainAxis.END: "MainAxisAlignment.end",
    MainAxis.SPACE_BETWEEN: "MainAxisAlignment.spaceBetween",
    MainAxis.SPACE_AROUND: "MainAxisAlignment.spaceAround",
    MainAxis.SPACE_EVENLY: "MainAxisAlignment.spaceEvenly",
}

_CROSS_AXIS = {
    CrossAxis.START: "CrossAxisAlignment.start",
    CrossAxis.CENTER: "CrossAxisAlignment.center",
    CrossAxis.END: "CrossAxisAlignment.end",
    CrossAxis.STRETCH: "CrossAxisAlignment.stretch",
}

_KEYBOARD_TYPES = {
    "email": "TextInputType.emailAddress",
    "number": "TextInputType.number",
    "tel": "TextInputType.phone",
    "url": "TextInputType.url",
}

_IDENTIFIER_WORD = re.compile(r"[A-Za-z0-9]+")


@dataclass
class GenerationWarning:
    """Non-fatal issue noticed while generating code.

    Attributes:
        screen_id: Screen holding the element.
        element_id: Element that triggered the warning.
        message: Human-readable explanation.
        value: The offending value (optional).
    """

    screen_id: str
    element_id: str
    message: str
    value: str | None = None


@dataclass
class GenerationResult:
    """Generated Dart source plus any warnings.

    Attributes:
        code: The complete Dart source file.
        warnings: Issues that did not stop generation.
    """

    code: str
    warnings: list[GenerationWarning] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        """Check if any warnings were emitted."""
        return len(self.warnings) > 0


# === DART LITERALS ===


def dart_string(value: Any) -> str:
    """Encode a value as a single-quoted Dart string literal.

    Example:
        >>> dart_string("It's $5")
        "'It\\\\'s \\\\$5'"
    """
    text = "" if value is None else str(value)
    escaped = (
        text.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("$", "\\$")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f"'{escaped}'"


def dart_double(value: Any) -> str:
    """Format a number as a Dart double with one decimal place."""
    return f"{float(value):.1f}"


def dart_color(value: Any) -> str:
    """Format a hex color as a Flutter ``Color`` constructor call."""
    return f"Color({hex_to_argb(value)})"


def dart_icon(name: str) -> str:
    """Reference a Material icon constant by its resolved name."""
    return f"Icons.{name}"


def class_name(name: str) -> str:
    """Derive a Dart class name from a screen name.

    Words are capitalized and joined; everything that is not a letter or
    digit is dropped.

    Example:
        >>> class_name("user settings")
        'UserSettingsScreen'
    """
    words = _IDENTIFIER_WORD.findall(name or "")
    base = "".join(word[0].upper() + word[1:] for word in words) or "Untitled"
    if base[0].isdigit():
        base = f"Screen{base}"
    return f"{base}Screen"


def assign_class_names(screens: list[Screen]) -> list[str]:
    """Assign a unique class name to each screen, in order.

    Later screens whose name collides get a numeric suffix.

    Example:
        >>> names = assign_class_names([home_a, home_b])
        >>> names
        ['HomeScreen', 'HomeScreen2']
    """
    used: set[str] = set()
    names = []
    for screen in screens:
        base = class_name(screen.name)
        candidate = base
        suffix = 2
        while candidate in used:
            candidate = f"{base}{suffix}"
            suffix += 1
        used.add(candidate)
        names.append(candidate)
    return names


def _nest(lines: list[str], level: int = 1) -> list[str]:
    prefix = _INDENT * level
    return [f"{prefix}{line}" if line else line for line in lines]


def _attach(key: str, widget: list[str], level: int = 1) -> list[str]:
    """Emit ``key: <widget>,`` with the widget's lines nested under the key."""
    prefix = _INDENT * level
    head = f"{prefix}{key}: {widget[0]}"
    if len(widget) == 1:
        return [f"{head},"]
    return [head, *_nest(widget[1:-1], level), f"{prefix}{widget[-1]},"]


def _children(widgets: list[list[str]], level: int = 1) -> list[str]:
    """Emit a ``children: [...]`` block of widgets."""
    prefix = _INDENT * level
    lines = [f"{prefix}children: ["]
    for widget in widgets:
        lines.extend(_nest(widget[:-1], level + 1))
        lines.append(f"{prefix}{_INDENT}{widget[-1]},")
    lines.append(f"{prefix}],")
    return lines


def _placeholder(width: int, height: int, shade: int = 300) -> list[str]:
    return [
        "Container(",
        f"  width: {dart_double(width)},",
        f"  height: {dart_double(height)},",
        f"  color: Colors.grey.shade{shade},",
        ")",
    ]


def _outline_border(color: str | None = None) -> list[str]:
    if color is None:
        return [
            "OutlineInputBorder(",
            "  borderRadius: BorderRadius.circular(8.0),",
            ")",
        ]
    return [
        "OutlineInputBorder(",
        "  borderRadius: BorderRadius.circular(8.0),",
        f"  borderSide: BorderSide(color: {dart_color(color)}),",
        ")",
    ]


class FlutterGenerator:
    """Generates a Flutter application from screen designs.

    Args:
        dark_mode: Emit the dark theme block.
        app_title: Title passed to ``MaterialApp``.
    """

    def __init__(
        self, dark_mode: bool = False, app_title: str = DEFAULT_APP_TITLE
    ) -> None:
        self.dark_mode = dark_mode
        self.app_title = app_title

    def generate(self, screens: list[Screen]) -> str:
        """Generate the Dart source for a design."""
        return self.generate_with_warnings(screens).code

    def generate_with_warnings(self, screens: list[Screen]) -> GenerationResult:
        """Generate the Dart source and collect non-fatal warnings.

        Navigation targets that name no screen are reported but still
        emitted as ``pushNamed`` calls.

        Args:
            screens: Screens in route and drawer order.

        Returns:
            GenerationResult with the source and any warnings.
        """
        warnings = self._collect_warnings(screens)
        for warning in warnings:
            logger.warning(
                f"Screen '{warning.screen_id}', element '{warning.element_id}': "
                f"{warning.message}"
            )

        names = assign_class_names(screens)
        parts = [
            "import 'package:flutter/material.dart';",
            "",
            "void main() {",
            "  runApp(const MyApp());",
            "}",
            "",
            *self._app(screens, names),
            "",
            *self._sidebar(screens),
        ]
        for screen, name in zip(screens, names):
            parts.append("")
            parts.extend(self._screen(screen, name))

        logger.debug(f"Generated {len(screens)} screen(s)")
        return GenerationResult(code="\n".join(parts) + "\n", warnings=warnings)

    def _collect_warnings(self, screens: list[Screen]) -> list[GenerationWarning]:
        screen_ids = {screen.id for screen in screens}
        warnings: list[GenerationWarning] = []
        for screen in screens:
            for element in screen.elements:
                if element.type != ComponentType.BUTTON:
                    continue
                target = element.typed_properties().navigate_to
                if target and target not in screen_ids:
                    warnings.append(
                        GenerationWarning(
                            screen_id=screen.id,
                            element_id=element.id,
                            message=f"Navigation target '{target}' is not a screen",
                            value=target,
                        )
                    )
        return warnings

    # === Application shell ===

    def _theme(self) -> list[str]:
        if self.dark_mode:
            return [
                "ThemeData(",
                "  brightness: Brightness.dark,",
                "  primarySwatch: Colors.blue,",
                "  scaffoldBackgroundColor: const Color(0xFF121212),",
                "  appBarTheme: const AppBarTheme(",
                "    backgroundColor: Color(0xFF1E1E1E),",
                "    elevation: 0,",
                "  ),",
                ")",
            ]
        return [
            "ThemeData(",
            "  brightness: Brightness.light,",
            "  primarySwatch: Colors.blue,",
            "  scaffoldBackgroundColor: Colors.white,",
            "  appBarTheme: const AppBarTheme(",
            "    backgroundColor: Colors.white,",
            "    foregroundColor: Colors.black,",
            "    elevation: 0,",
            "  ),",
            ")",
        ]

    def _app(self, screens: list[Screen], names: list[str]) -> list[str]:
        lines = [
            "class MyApp extends StatelessWidget {",
            "  const MyApp({super.key});",
            "",
            "  @override",
            "  Widget build(BuildContext context) {",
            "    return MaterialApp(",
            f"      title: {dart_string(self.app_title)},",
            "      debugShowCheckedModeBanner: false,",
            *_attach("theme", self._theme(), 3),
        ]
        if screens:
            lines.append(f"      initialRoute: {dart_string('/' + screens[0].id)},")
            lines.append("      routes: {")
            for screen, name in zip(screens, names):
                route = dart_string("/" + screen.id)
                lines.append(f"        {route}: (context) => const {name}(),")
            lines.append("      },")
        else:
            lines.append("      home: const Scaffold(),")
        lines.extend(["    );", "  }", "}"])
        return lines

    def _sidebar(self, screens: list[Screen]) -> list[str]:
        lines = [
            "class AppSidebar extends StatelessWidget {",
            "  const AppSidebar({super.key});",
            "",
            "  @override",
            "  Widget build(BuildContext context) {",
            "    return Drawer(",
            "      child: ListView(",
            "        children: [",
            "          const DrawerHeader(",
            "            child: Text(",
            "              'Screens',",
            "              style: TextStyle(",
            "                fontSize: 24, fontWeight: FontWeight.bold),",
            "            ),",
            "          ),",
        ]
        for screen in screens:
            route = dart_string("/" + screen.id)
            lines.extend(
                [
                    "          ListTile(",
                    f"            title: Text({dart_string(screen.name)}),",
                    "            onTap: () {",
                    "              Navigator.of(context).pop();",
                    "              if (ModalRoute.of(context)?.settings.name != "
                    f"{route}) {{",
                    "                Navigator.of(context)"
                    f".pushReplacementNamed({route});",
                    "              }",
                    "            },",
                    "          ),",
                ]
            )
        lines.extend(["        ],", "      ),", "    );", "  }", "}"])
        return lines

    # === Screens ===

    def _state_fields(self, screen: Screen) -> list[str]:
        fields = []
        for index, element in enumerate(screen.elements):
            if not is_interactive_type(element.type):
                continue
            props = element.typed_properties()
            if not props.interactive:
                continue
            match element.type:
                case ComponentType.SWITCH:
                    value = "true" if props.value else "false"
                    fields.append(f"bool _switch{index} = {value};")
                case ComponentType.CHECKBOX:
                    value = "true" if props.value else "false"
                    fields.append(f"bool _checkbox{index} = {value};")
                case ComponentType.DROPDOWN:
                    fields.append(
                        f"String? _dropdown{index} = {_dropdown_value(props)};"
                    )
        return fields

    def _screen(self, screen: Screen, name: str) -> list[str]:
        lines = [
            f"class {name} extends StatefulWidget {{",
            f"  const {name}({{super.key}});",
            "",
            "  @override",
            f"  State<{name}> createState() => _{name}State();",
            "}",
            "",
            f"class _{name}State extends State<{name}> {{",
        ]
        fields = self._state_fields(screen)
        if fields:
            lines.extend(_nest(fields))
            lines.append("")
        lines.extend(
            [
                "  @override",
                "  Widget build(BuildContext context) {",
                "    return Scaffold(",
                "      appBar: AppBar(",
                f"        title: Text({dart_string(screen.name)}),",
                "      ),",
                "      drawer: const AppSidebar(),",
                "      body: Stack(",
                "        children: [",
            ]
        )
        if screen.elements:
            for index, element in enumerate(screen.elements):
                lines.extend(_nest(self._positioned(element, index), 5))
        else:
            lines.append(f"          {EMPTY_BODY_MARKER}")
        lines.extend(["        ],", "      ),", "    );", "  }", "}"])
        return lines

    def _positioned(self, element: DesignElement, index: int) -> list[str]:
        element_id = " ".join(element.id.split())
        return [
            f"// {element.type.value} '{element_id}'",
            "Positioned(",
            f"  left: {dart_double(element.x)},",
            f"  top: {dart_double(element.y)},",
            f"  width: {dart_double(element.width)},",
            f"  height: {dart_double(element.height)},",
            *_attach("child", self.widget(element, index)),
            "),",
        ]

    def widget(self, element: DesignElement, index: int = 0) -> list[str]:
        """Build the widget snippet for one element.

        Args:
            element: Element to convert.
            index: Position in the screen's element list; names state fields.

        Returns:
            Lines of Dart code with relative indentation.
        """
        props = element.typed_properties()

        match element.type:
            case ComponentType.BUTTON:
                return self._button(props)
            case ComponentType.TEXT_FIELD:
                return self._text_field(props)
            case ComponentType.CARD:
                return self._card(props)
            case ComponentType.LIST:
                return self._list(props)
            case ComponentType.ICON:
                return self._icon(props)
            case ComponentType.CONTAINER:
                return self._container(props)
            case ComponentType.ROW:
                return self._flex(props, "Row")
            case ComponentType.COLUMN:
                return self._flex(props, "Column")
            case ComponentType.STACK:
                return self._stack(props)
            case ComponentType.SWITCH:
                return self._switch(props, index)
            case ComponentType.CHECKBOX:
                return self._checkbox(props, index)
            case ComponentType.RADIO:
                return self._radio_control(props)
            case ComponentType.CHAT_INPUT:
                return self._chat_input(props)
            case ComponentType.CHAT_MESSAGE:
                return self._chat_message(props)
            case ComponentType.DROPDOWN:
                return self._dropdown(props, index)
            case ComponentType.INPUT_WITH_LABEL:
                return self._input_with_label(props)
            case ComponentType.SWITCH_WITH_LABEL:
                return self._labeled(props, self._switch_control(props))
            case ComponentType.RADIO_WITH_LABEL:
                return self._labeled(props, self._radio_control(props))
            case ComponentType.CHECKBOX_WITH_LABEL:
                return self._labeled(props, self._checkbox_control(props))
            case ComponentType.DYNAMIC_TABLE:
                return self._table(props)

    # === Controls ===

    def _button(self, props) -> list[str]:
        color = property_color(props, "color")
        shape = (
            "const StadiumBorder()"
            if props.rounded
            else "RoundedRectangleBorder(borderRadius: BorderRadius.circular(8.0))"
        )
        if props.navigate_to:
            route = dart_string("/" + props.navigate_to)
            on_pressed = [
                "() {",
                f"  Navigator.of(context).pushNamed({route});",
                "}",
            ]
        else:
            on_pressed = ["() {}"]

        if props.variant == "outline":
            return [
                "OutlinedButton(",
                *_attach("onPressed", on_pressed),
                "  style: OutlinedButton.styleFrom(",
                f"    foregroundColor: {dart_color(color)},",
                f"    side: BorderSide(color: {dart_color(color)}, width: 2.0),",
                f"    shape: {shape},",
                f"    padding: EdgeInsets.all({dart_double(props.padding)}),",
                "  ),",
                *_attach("child", self._button_label(props.text)),
                ")",
            ]

        if props.variant == "secondary":
            background, foreground = SECONDARY_BUTTON_COLOR, SECONDARY_BUTTON_TEXT
        else:
            background, foreground = color, contrast_color(color)
        return [
            "ElevatedButton(",
            *_attach("onPressed", on_pressed),
            "  style: ElevatedButton.styleFrom(",
            f"    backgroundColor: {dart_color(background)},",
            f"    foregroundColor: {dart_color(foreground)},",
            f"    shape: {shape},",
            f"    padding: EdgeInsets.all({dart_double(props.padding)}),",
            "    elevation: 2,",
            "  ),",
            *_attach("child", self._button_label(props.text)),
            ")",
        ]

    def _button_label(self, text: str) -> list[str]:
        return [
            "Text(",
            f"  {dart_string(text)},",
            "  style: const TextStyle(fontWeight: FontWeight.w600, fontSize: 16),",
            ")",
        ]

    def _text_field(self, props) -> list[str]:
        lines = [
            "TextField(",
            "  decoration: InputDecoration(",
        ]
        if props.label:
            lines.append(f"    labelText: {dart_string(props.label)},")
        lines.append(f"    hintText: {dart_string(props.hint)},")
        if props.has_icon:
            icon = dart_icon(resolve_icon_name(props.icon))
            lines.append(f"    prefixIcon: const Icon({icon}),")
        if props.validation:
            lines.append(f"    errorText: {dart_string(props.validation_message)},")
        lines.extend(
            [
                *_attach("border", _outline_border(), 2),
                "  ),",
                ")",
            ]
        )
        return lines

    def _switch_control(self, props, state: str | None = None) -> list[str]:
        value = state or ("true" if props.value else "false")
        lines = [
            "Switch(",
            f"  value: {value},",
            f"  activeColor: {dart_color(property_color(props, 'active_color'))},",
            "  inactiveTrackColor: "
            f"{dart_color(property_color(props, 'inactive_color'))},",
        ]
        if state:
            lines.extend(
                [
                    "  onChanged: (bool newValue) {",
                    "    setState(() {",
                    f"      {state} = newValue;",
                    "    });",
                    "  },",
                ]
            )
        elif getattr(props, "disabled", False):
            lines.append("  onChanged: null,")
        else:
            lines.append("  onChanged: (bool newValue) {},")
        lines.append(")")
        return lines

    def _checkbox_control(self, props, state: str | None = None) -> list[str]:
        value = state or ("true" if props.value else "false")
        lines = [
            "Checkbox(",
            f"  value: {value},",
            f"  activeColor: {dart_color(property_color(props, 'active_color'))},",
        ]
        if state:
            lines.extend(
                [
                    "  onChanged: (bool? newValue) {",
                    "    setState(() {",
                    f"      {state} = newValue ?? false;",
                    "    });",
                    "  },",
                ]
            )
        elif getattr(props, "disabled", False):
            lines.append("  onChanged: null,")
        else:
            lines.append("  onChanged: (bool? newValue) {},")
        lines.append(")")
        return lines

    def _radio_control(self, props) -> list[str]:
        group = dart_string(props.group_value)
        on_changed = (
            "null" if getattr(props, "disabled", False) else "(String? newValue) {}"
        )
        return [
            "Radio<String>(",
            f"  value: {group},",
            f"  groupValue: {group if props.value else 'null'},",
            f"  activeColor: {dart_color(property_color(props, 'active_color'))},",
            f"  onChanged: {on_changed},",
            ")",
        ]

    def _with_label(self, control: list[str], label: str) -> list[str]:
        if not label:
            return control
        return [
            "Row(",
            "  mainAxisAlignment: MainAxisAlignment.center,",
            *_children(
                [
                    control,
                    ["const SizedBox(width: 8.0)"],
                    [f"Text({dart_string(label)})"],
                ]
            ),
            ")",
        ]

    def _switch(self, props, index: int) -> list[str]:
        state = f"_switch{index}" if props.interactive else None
        return self._with_label(self._switch_control(props, state), props.label)

    def _checkbox(self, props, index: int) -> list[str]:
        state = f"_checkbox{index}" if props.interactive else None
        return self._with_label(self._checkbox_control(props, state), props.label)

    def _labeled(self, props, control: list[str]) -> list[str]:
        label = [
            "Text(",
            f"  {dart_string(props.label)},",
            "  style: TextStyle("
            f"color: {dart_color(property_color(props, 'label_color'))}),",
            ")",
        ]
        spacer = ["const SizedBox(width: 12.0)"]
        if props.label_position == "left":
            children = [label, spacer, control]
        else:
            children = [control, spacer, label]
        return ["Row(", *_children(children), ")"]

    def _label_text(self, props) -> list[str]:
        text = f"{props.label} *" if props.required else props.label
        return [
            "Text(",
            f"  {dart_string(text)},",
            "  style: TextStyle(",
            "    fontWeight: FontWeight.w500,",
            f"    color: {dart_color(property_color(props, 'label_color'))},",
            "  ),",
            ")",
        ]

    # === Inputs ===

    def _dropdown(self, props, index: int) -> list[str]:
        options = parse_options(props.options)
        label = f"{props.label} *" if props.required and props.label else props.label
        lines = ["DropdownButtonFormField<String>(", "  decoration: InputDecoration("]
        if label:
            lines.append(f"    labelText: {dart_string(label)},")
        if props.placeholder:
            lines.append(f"    hintText: {dart_string(props.placeholder)},")
        lines.extend(
            [
                "    filled: true,",
                "    fillColor: "
                f"{dart_color(property_color(props, 'background_color'))},",
                *_attach(
                    "enabledBorder",
                    _outline_border(property_color(props, "border_color")),
                    2,
                ),
                "  ),",
                "  isExpanded: true,",
            ]
        )
        state = f"_dropdown{index}" if props.interactive else None
        lines.append(f"  value: {state or _dropdown_value(props)},")
        lines.append("  items: [")
        for option in options:
            lines.extend(
                [
                    "    DropdownMenuItem<String>(",
                    f"      value: {dart_string(option['value'])},",
                    f"      child: Text({dart_string(option['label'])}),",
                    "    ),",
                ]
            )
        lines.append("  ],")
        if props.disabled:
            lines.append("  onChanged: null,")
        elif state:
            lines.extend(
                [
                    "  onChanged: (String? newValue) {",
                    "    setState(() {",
                    f"      {state} = newValue;",
                    "    });",
                    "  },",
                ]
            )
        else:
            lines.append("  onChanged: (String? newValue) {},")
        lines.append(")")
        return lines

    def _input_with_label(self, props) -> list[str]:
        field_lines = ["TextField("]
        if props.value:
            field_lines.append(
                "  controller: "
                f"TextEditingController(text: {dart_string(props.value)}),"
            )
        if props.disabled:
            field_lines.append("  enabled: false,")
        if props.input_type == "password":
            field_lines.append("  obscureText: true,")
        keyboard = _KEYBOARD_TYPES.get(props.input_type)
        if keyboard:
            field_lines.append(f"  keyboardType: {keyboard},")
        field_lines.extend(
            [
                "  decoration: InputDecoration(",
                f"    hintText: {dart_string(props.placeholder)},",
                *_attach(
                    "border", _outline_border(property_color(props, "border_color")), 2
                ),
                "  ),",
                ")",
            ]
        )
        return [
            "Column(",
            "  crossAxisAlignment: CrossAxisAlignment.start,",
            *_children(
                [
                    self._label_text(props),
                    ["const SizedBox(height: 4.0)"],
                    field_lines,
                ]
            ),
            ")",
        ]

    def _chat_input(self, props) -> list[str]:
        button_color = property_color(props, "button_color")
        text_field = [
            "Expanded(",
            "  child: TextField(",
            "    decoration: InputDecoration(",
            f"      hintText: {dart_string(props.placeholder)},",
            *_attach("border", _outline_border(), 3),
            "      contentPadding:",
            "          EdgeInsets.symmetric(horizontal: 12.0, vertical: 8.0),",
            "    ),",
            "  ),",
            ")",
        ]
        send = [
            "ElevatedButton(",
            "  onPressed: () {},",
            "  style: ElevatedButton.styleFrom(",
            f"    backgroundColor: {dart_color(button_color)},",
            f"    foregroundColor: {dart_color(contrast_color(button_color))},",
            "  ),",
            f"  child: Text({dart_string(props.button_text)}),",
            ")",
        ]
        return [
            "Row(",
            *_children([text_field, ["const SizedBox(width: 8.0)"], send]),
            ")",
        ]

    def _chat_message(self, props) -> list[str]:
        bubble = USER_BUBBLE_COLOR if props.is_user else OTHER_BUBBLE_COLOR
        text_color = USER_BUBBLE_TEXT if props.is_user else OTHER_BUBBLE_TEXT
        side = "end" if props.is_user else "start"
        column = [
            [
                "Container(",
                "  padding: const EdgeInsets.all(12.0),",
                "  decoration: BoxDecoration(",
                f"    color: {dart_color(bubble)},",
                "    borderRadius: BorderRadius.circular(8.0),",
                "  ),",
                "  child: Text(",
                f"    {dart_string(props.text)},",
                f"    style: TextStyle(color: {dart_color(text_color)}),",
                "  ),",
                ")",
            ]
        ]
        if props.timestamp:
            column.append(
                [
                    f"Text({dart_string(SAMPLE_TIMESTAMP)}, "
                    "style: const TextStyle(fontSize: 12, color: Colors.grey))"
                ]
            )
        message = [
            "Column(",
            "  mainAxisSize: MainAxisSize.min,",
            f"  crossAxisAlignment: CrossAxisAlignment.{side},",
            *_children(column),
            ")",
        ]
        if not props.avatar:
            alignment = "centerRight" if props.is_user else "centerLeft"
            return [
                "Align(",
                f"  alignment: Alignment.{alignment},",
                *_attach("child", message),
                ")",
            ]

        avatar_color = USER_AVATAR_COLOR if props.is_user else OTHER_AVATAR_COLOR
        avatar = [
            f"CircleAvatar(radius: 16, backgroundColor: {dart_color(avatar_color)})"
        ]
        spacer = ["const SizedBox(width: 8.0)"]
        flexible = ["Flexible(", *_attach("child", message), ")"]
        if props.is_user:
            children = [flexible, spacer, avatar]
        else:
            children = [avatar, spacer, flexible]
        return [
            "Row(",
            f"  mainAxisAlignment: MainAxisAlignment.{side},",
            "  crossAxisAlignment: CrossAxisAlignment.start,",
            *_children(children),
            ")",
        ]

    # === Layout ===

    def _card(self, props) -> list[str]:
        column: list[list[str]] = []
        if props.show_image:
            column.append(
                [
                    "Container(",
                    f"  height: {dart_double(props.image_height)},",
                    "  width: double.infinity,",
                    "  decoration: BoxDecoration(",
                    "    color: Colors.grey.shade300,",
                    "    borderRadius: BorderRadius.circular(4.0),",
                    "  ),",
                    "  child: Icon(",
                    "    Icons.image,",
                    "    size: 48,",
                    "    color: Colors.grey.shade600,",
                    "  ),",
                    ")",
                ]
            )
            column.append(["const SizedBox(height: 12.0)"])
        column.append(
            [
                "Text(",
                f"  {dart_string(props.title or 'Card Title')},",
                "  style: const TextStyle(fontSize: 18, fontWeight: FontWeight.bold),",
                ")",
            ]
        )
        if props.subtitle:
            column.append(["const SizedBox(height: 4.0)"])
            column.append(
                [
                    "Text(",
                    f"  {dart_string(props.subtitle)},",
                    "  style: TextStyle(fontSize: 14, color: Colors.grey.shade600),",
                    ")",
                ]
            )
        column.append(["const SizedBox(height: 8.0)"])
        column.append(
            [
                "Text(",
                f"  {dart_string(props.content or 'Card content goes here...')},",
                "  style: const TextStyle(fontSize: 14),",
                ")",
            ]
        )
        return [
            "Card(",
            f"  elevation: {dart_double(props.elevation)},",
            f"  color: {dart_color(property_color(props, 'color'))},",
            "  clipBehavior: Clip.antiAlias,",
            "  shape: RoundedRectangleBorder(",
            "    borderRadius: BorderRadius.circular("
            f"{dart_double(props.border_radius)}),",
            "  ),",
            "  child: Padding(",
            f"    padding: EdgeInsets.all({dart_double(props.padding)}),",
            "    child: Column(",
            "      crossAxisAlignment: CrossAxisAlignment.start,",
            *_children(column, 3),
            "    ),",
            "  ),",
            ")",
        ]

    def _list(self, props) -> list[str]:
        horizontal = props.direction == "horizontal"
        tiles = []
        for i, item in enumerate(parse_list_items(props.data)):
            subtitle = item["subtitle"] or f"Description {i + 1}"
            icon = dart_icon(resolve_icon_name(item["icon"], LIST_ITEM_ICON))
            tile = [
                "ListTile(",
                f"  leading: Icon({icon}, color: Colors.blue),",
                "  title: Text(",
                f"    {dart_string(item['title'])},",
                "    style: const TextStyle(fontWeight: FontWeight.w500),",
                "  ),",
                f"  subtitle: Text({dart_string(subtitle)}),",
            ]
            if not horizontal:
                tile.append(
                    "  trailing: const Icon(Icons.arrow_forward_ios, size: 16),"
                )
            tile.append(")")
            size = (
                "  width: 200.0,"
                if horizontal
                else f"  height: {dart_double(props.item_height)},"
            )
            margin = "right" if horizontal else "bottom"
            tiles.append(
                [
                    "Container(",
                    size,
                    f"  margin: const EdgeInsets.only({margin}: 8.0),",
                    "  decoration: BoxDecoration(",
                    "    color: Colors.white,",
                    "    borderRadius: BorderRadius.circular(8.0),",
                    "    border: Border.all(color: Colors.grey.shade300),",
                    "  ),",
                    *_attach("child", tile),
                    ")",
                ]
            )
        lines = ["ListView("]
        if horizontal:
            lines.append("  scrollDirection: Axis.horizontal,")
        if not props.scrollable:
            lines.append("  physics: const NeverScrollableScrollPhysics(),")
        lines.extend(_children(tiles))
        lines.append(")")
        return lines

    def _icon(self, props) -> list[str]:
        return [
            "Icon(",
            f"  {dart_icon(resolve_icon_name(props.name))},",
            f"  color: {dart_color(property_color(props, 'color'))},",
            f"  size: {dart_double(props.size)},",
            ")",
        ]

    def _container(self, props) -> list[str]:
        return [
            "Container(",
            f"  padding: EdgeInsets.all({dart_double(props.padding)}),",
            f"  margin: EdgeInsets.all({dart_double(props.margin)}),",
            "  decoration: BoxDecoration(",
            f"    color: {dart_color(property_color(props, 'color'))},",
            "    borderRadius: BorderRadius.circular("
            f"{dart_double(props.border_radius)}),",
            "  ),",
            ")",
        ]

    def _flex(self, props, widget: str) -> list[str]:
        main_axis = parse_main_axis(props.main_axis_alignment)
        cross_axis = parse_cross_axis(props.cross_axis_alignment)
        if widget == "Row":
            block = _placeholder(30, 30)
            spacer = ["const SizedBox(width: 8.0)"]
        else:
            block = _placeholder(100, 30)
            spacer = ["const SizedBox(height: 8.0)"]
        return [
            "Padding(",
            f"  padding: EdgeInsets.all({dart_double(props.padding)}),",
            f"  child: {widget}(",
            f"    mainAxisAlignment: {_MAIN_AXIS[main_axis]},",
            f"    crossAxisAlignment: {_CROSS_AXIS[cross_axis]},",
            *_children([block, spacer, block, spacer, block], 2),
            "  ),",
            ")",
        ]

    def _stack(self, props) -> list[str]:
        anchor = parse_stack_alignment(props.alignment)
        return [
            "Padding(",
            f"  padding: EdgeInsets.all({dart_double(props.padding)}),",
            "  child: Stack(",
            f"    alignment: {_stack_alignment(anchor)},",
            *_children([_placeholder(60, 60, 200), _placeholder(40, 40)], 2),
            "  ),",
            ")",
        ]

    def _table(self, props) -> list[str]:
        columns, rows = parse_table(props.columns, props.data)
        table = ["DataTable("]
        if not props.show_header:
            table.append("  headingRowHeight: 0,")
        else:
            table.append(
                "  headingRowColor: WidgetStatePropertyAll("
                f"{dart_color(property_color(props, 'header_color'))}),"
            )
        if props.show_border:
            table.append(
                "  border: TableBorder.all("
                f"color: {dart_color(property_color(props, 'border_color'))}),"
            )
        table.append("  columns: [")
        for column in columns:
            if props.sortable:
                table.extend(
                    [
                        "    DataColumn(",
                        f"      label: Text({dart_string(column['title'])}),",
                        "      onSort: (columnIndex, ascending) {},",
                        "    ),",
                    ]
                )
            else:
                table.append(
                    f"    DataColumn(label: Text({dart_string(column['title'])})),"
                )
        table.append("  ],")
        table.append("  rows: [")
        for index, row in enumerate(rows):
            table.append("    DataRow(")
            if props.striped:
                stripe = "even_row_color" if index % 2 == 0 else "odd_row_color"
                table.append(
                    "      color: WidgetStatePropertyAll("
                    f"{dart_color(property_color(props, stripe))}),"
                )
            table.append("      cells: [")
            for column in columns:
                text = cell_text(row, column["id"]) or "-"
                table.append(f"        DataCell(Text({dart_string(text)})),")
            table.extend(["      ],", "    ),"])
        table.extend(["  ],", ")"])

        scroll = [
            "Expanded(",
            "  child: SingleChildScrollView(",
            "    scrollDirection: Axis.horizontal,",
            *_attach("child", table, 2),
            "  ),",
            ")",
        ]
        children: list[list[str]] = []
        if props.title:
            children.append(
                [
                    "Padding(",
                    "  padding: const EdgeInsets.all(16.0),",
                    "  child: Text(",
                    f"    {dart_string(props.title)},",
                    "    style: const TextStyle(",
                    "      fontSize: 18,",
                    "      fontWeight: FontWeight.bold,",
                    "    ),",
                    "  ),",
                    ")",
                ]
            )
        children.append(scroll)
        return [
            "Column(",
            "  crossAxisAlignment: CrossAxisAlignment.start,",
            *_children(children),
            ")",
        ]


def _stack_alignment(anchor: StackAlignment) -> str:
    return f"Alignment.{anchor.value}"


def _dropdown_value(props) -> str:
    """Dart literal for a dropdown's selection; unknown values become null."""
    values = [option["value"] for option in parse_options(props.options)]
    if props.value and props.value in values:
        return dart_string(props.value)
    return "null"


def generate(
    screens: list[Screen],
    dark_mode: bool = False,
    app_title: str = DEFAULT_APP_TITLE,
) -> str:
    """Generate a complete Flutter application for a design.

    Args:
        screens: Screens in route and drawer order; the first is the
            initial route.
        dark_mode: Emit the dark theme.
        app_title: ``MaterialApp`` title.

    Returns:
        Dart source text.

    Example:
        >>> code = generate([Screen(id="home", name="Home")])
        >>> "class HomeScreen extends StatefulWidget" in code
        True
    """
    return FlutterGenerator(dark_mode, app_title).generate(screens)


def generate_with_warnings(
    screens: list[Screen],
    dark_mode: bool = False,
    app_title: str = DEFAULT_APP_TITLE,
) -> GenerationResult:
    """Generate source and report unresolved navigation targets."""
    return FlutterGenerator(dark_mode, app_title).generate_with_warnings(screens)


__all__ = [
    "DEFAULT_APP_TITLE",
    "EMPTY_BODY_MARKER",
    "GenerationWarning",
    "GenerationResult",
    "FlutterGenerator",
    "dart_string",
    "dart_double",
    "dart_color",
    "dart_icon",
    "class_name",
    "assign_class_names",
    "generate",
    "generate_with_warnings",
]
