"""Failure conditions raised on invalid render inputs."""


class FractalError(ValueError):
    """Base class for invalid fractal render parameters."""


class InvalidDimensions(FractalError):
    """Image width or height is not a positive integer."""


class InvalidBudget(FractalError):
    """Iteration budget (max_iterations) is not a positive integer."""


def check_dimensions(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidDimensions(f"Width and height must be positive, got {width}x{height}.")


def check_budget(max_iterations: int) -> None:
    if max_iterations <= 0:
        raise InvalidBudget(f"max_iterations must be positive, got {max_iterations}.")
