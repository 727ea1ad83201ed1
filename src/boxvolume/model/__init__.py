"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt).
It deals with the volume arithmetic, number formatting and input parsing.
"""
