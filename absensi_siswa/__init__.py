"""Absensi Siswa package.

Student attendance backend for a spreadsheet-backed Apps Script endpoint,
organized by feature modules (students, attendance, recap) with a thin Flask
controller layer over plain service classes.
"""
