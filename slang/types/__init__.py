from slang.types.nil import Nil, NilType
from slang.types.symbol import Symbol
from slang.types.special_form import SpecialForm
from slang.types.application import Application
from slang.types.position import Position
from slang.types.frame import Frame, FrameStack

__all__ = [
    "Nil",
    "NilType",
    "Symbol",
    "SpecialForm",
    "Application",
    "Position",
    "Frame",
    "FrameStack",
]
