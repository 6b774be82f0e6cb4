"""Report rendering and file output.

Reports are small fixed-name text files, rendered to strings first and then
written in one call each.
"""
