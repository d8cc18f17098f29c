"""
web - Веб-интерфейс (Flask).
"""
