# type: ignore
__submodules__ = ["markup", "template"]


# <AUTOGEN_INIT>
import lazy_loader

__getattr__, __dir__, __all__ = lazy_loader.attach_stub(__name__, __file__)

__all__ = [
    "dump_markup",
    "parse_markup",
    "parse_template",
    "split_alignment",
    "split_template",
]
# </AUTOGEN_INIT>
