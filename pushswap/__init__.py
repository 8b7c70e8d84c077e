"""Two-stack sorting with a fixed set of operations, and a checker for operation lists."""

__version__ = "1.0.0"
__all__ = ["stacks", "parsing", "solver", "checker"]