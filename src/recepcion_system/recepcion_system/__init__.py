"""Recepcion System package.

Backend for the plant reception desk: employee entry logs (registros) and
visitor access control gated by monthly ARL and current EPS coverage.
Organized by feature modules (employees, registros, persons, coverage,
visits) with a thin Flask controller layer over service/repository layers.
"""
