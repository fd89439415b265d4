"""
app package marker.
"""
