from .calculator import Calculator
from .car import Car, CarState
from .television import Television

__all__ = ["Calculator", "Car", "CarState", "Television"]
