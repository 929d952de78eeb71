"""
conftest.py

Корень проекта попадает в sys.path, тесты импортируют core, solvers и т.д.
"""
