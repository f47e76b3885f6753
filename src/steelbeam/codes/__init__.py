# Design code provisions
from .base_code import DesignCode, DeflectionLimit
from .aisc360 import AISC360
