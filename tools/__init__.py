"""
tools - Инструменты профилирования.
"""
