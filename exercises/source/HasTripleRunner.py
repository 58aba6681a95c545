"""Runner artifact for the HasTriple exercise."""

from kata_eval.runner.infrastructure.has_triple import HasTripleRunner

__all__ = ["HasTripleRunner"]
