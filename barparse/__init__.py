# type: ignore
__version__ = "0.0.0"

__submodules__ = ["actions", "commands", "core", "io", "types"]

# isort: split
# <AUTOGEN_INIT>
import lazy_loader

__getattr__, __dir__, __all__ = lazy_loader.attach_stub(__name__, __file__)

__all__ = [
    "Action",
    "BarConfig",
    "Command",
    "Icon",
    "Runnable",
    "Segment",
    "Text",
    "Widget",
    "dump_markup",
    "load_config",
    "parse_config_template",
    "parse_markup",
    "parse_string",
    "parse_template",
    "resolve_command",
    "split_alignment",
    "split_template",
    "strip_actions",
    "to_buttons",
]
# </AUTOGEN_INIT>
