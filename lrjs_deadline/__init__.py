"""
LRJS deadline calculator: Art. 82.5 LRJS filing deadlines with the Art. 45 grace day.
"""

__version__ = "0.1.0"
