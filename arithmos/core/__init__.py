"""
Core capability model, conformance declarations and generic algorithms.

Этот модуль не зависит от конкретных value types (arithmos.domain).
"""
