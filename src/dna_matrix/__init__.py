"""DNA Matrix - compare genetic-genealogy matches side by side.

Loads per-segment DNA match exports, aggregates them per match and
estimates relationship ranges from shared centiMorgans.
"""

__version__ = "0.1.0"

# Lazy imports keep `import dna_matrix` cheap for the CLI
def __getattr__(name: str):
    if name == "dna":
        from dna_matrix import dna
        return dna
    if name == "models":
        from dna_matrix import models
        return models
    if name == "export":
        from dna_matrix import export
        return export
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
