"""Functional primitives for seqlogic.

This module provides quantifiers, aggregations and folds over integer
sequences. Utilities are designed to be stateless and side-effect-free: each
takes a sequence, a half-open index range and, where needed, a caller supplied
predicate or combiner, and never copies or mutates the sequence.
"""
