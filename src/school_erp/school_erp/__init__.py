"""School ERP package.

Feature modules (students, attendance, fees, ...) sit on top of a
spreadsheet-style record store. A single action router exposes them over JSON
and a thin client façade consumes that endpoint.
"""
