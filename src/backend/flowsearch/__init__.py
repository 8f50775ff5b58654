"""flowsearch - attribute matching for search-as-you-type over a dataflow graph"""

__version__ = "1.0.0"
