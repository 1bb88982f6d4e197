# flake8: noqa

from .loader import load
from .synthetic import generate_data, make
