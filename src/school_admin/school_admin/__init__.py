"""School Admin package.

Feature modules (students, teachers, events, communications, reports, ...)
sit on top of a single persisted state store, with a thin Flask controller
layer and plain service classes in between.
"""
