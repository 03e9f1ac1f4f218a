"""Constants and catalogues.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from __future__ import annotations

from datetime import time

DEFAULT_TIMEZONE = "America/Guatemala"
ATTENDANCE_WINDOW_START = time(7, 0)
ATTENDANCE_WINDOW_MINUTES = 30

ATTENDANCE_HISTORY_DAYS = 14
PAYROLL_WINDOW_DAYS = 7
DEFAULT_MONTHLY_SALARY = 3000
DAYS_PER_MONTH = 30
WORKER_ID_SCAN_LIMIT = 250
DPI_LENGTH = 13

NOTIFICATIONS_CAP = 50
DEFAULT_PROJECT_DAYS = 120

INDIRECT_COSTS_PERCENT = 0.15
UTILITY_PERCENT = 0.10
TAX_PERCENT = 0.12

GUATEMALA_UNITS = [
    "Quetzal", "m3", "m2", "ml", "saco", "libra", "varilla", "quintal",
    "unidad", "global", "pie tabla", "litro", "viaje", "hora",
]

CATEGORIES_EXPENSE = [
    "Materiales", "Planilla", "Equipo/Herramienta", "Sub-contrato", "Administrativo", "Personales",
]

CATEGORIES_INCOME = [
    "Aporte (Cliente)", "Agrimensura", "Avaluó", "Planificación", "Ante Proyecto", "Otros",
]

# Puestos con salario mensual en quetzales.
POSITIONS = {
    "Ingeniero Residente": 12000,
    "Arquitecto Diseñador": 10000,
    "Supervisor de Obra": 8000,
    "Maestro de Obras": 6500,
    "Albañil de Primera": 4500,
    "Ayudante": 3200,
    "Peón / Estudiante": 2800,
    "Operador de Maquinaria": 5500,
}

COVER_TYPES = [
    "Losa Solida", "Losa Prefabricada", "Estructura Metálica",
    "Pérgola de Madera", "Pérgola de Metal", "Otros",
]

SPANISH_MONTHS = [
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
]
