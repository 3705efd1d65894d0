"""EmpTrack package.

Wi-Fi presence tracking for retail staff, organized by feature modules
(stores, employees, presence, attendance, ...) with a thin Flask controller
layer over in-memory service/repository layers.
"""
