from .results_md import generate_results_md

__all__ = ["generate_results_md"]
