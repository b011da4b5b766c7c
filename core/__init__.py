"""
core
----

Core data model of the covering engine:

- ConflictGraph & VertexData:
  The vertex/edge model and the primitive queries every algorithm builds on.

- Shapes & constraint intents:
  Star, SpecialStar, and the tagged constraint intents handed to the modelling layer.

- CoverState:
  Everything produced by one covering request, plus the CP-SAT handles.

- ConstraintManager:
  Register and apply constraint rules in a controlled sequence.
"""
