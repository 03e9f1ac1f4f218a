"""Prompt builders for the AI-assisted views (Spanish, Guatemalan market)."""

from __future__ import annotations

import json
from typing import Any, Iterable, Optional

from ..budgets.model import BudgetItem
from ..finance.model import Transaction
from ..projects.model import Project
from ..reports.service import WorkspaceMetrics

PURCHASING_SYSTEM_INSTRUCTION = """Eres el "Logistics Intelligence Director" de M&S Constructora.
Tu objetivo es minimizar el costo de adquisición (COA) y garantizar el flujo de materiales.
REGLAS DE OPERACIÓN:
- Eres proactivo: No esperes a que te pidan ahorrar, busca el ahorro en cada palabra del usuario.
- Eres territorial: Conoces a la perfección el mercado de Guatemala (Construfácil, EPA, Cemaco, Ferretería El Globo, Aceros de Guatemala, Progreso).
- Eres analítico: Usas los datos históricos proporcionados para cuestionar pedidos ineficientes.
- Eres ejecutivo: Tu lenguaje es directo, serio y enfocado en resultados financieros.
Usa Markdown profesional con tablas comparativas si es posible."""


def _dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def executive_briefing(metrics: WorkspaceMetrics) -> str:
    return (
        f"Actúa como CEO de M&S. Genera un resumen ejecutivo de 2 párrafos basado en: "
        f"Q{metrics.profit:g} utilidad, {metrics.active} obras activas, {metrics.employees} empleados. "
        f"Usa tono formal."
    )


def executive_report(metrics: WorkspaceMetrics) -> str:
    return f"""Actúa como Director General de M&S Constructora.
Analiza los siguientes datos consolidados y genera un REPORTE EJECUTIVO de 3 párrafos.

DATOS:
- Ingresos Totales: Q{metrics.total_income:g}
- Gastos Totales: Q{metrics.total_expense:g}
- Utilidad Bruta: Q{metrics.profit:g}
- Proyectos Totales: {metrics.total_projects}
- Personal en Cuadrilla: {metrics.employees}

Estructura:
1. Diagnóstico de Salud Financiera.
2. Análisis de Capacidad Operativa.
3. Recomendación Estratégica para el próximo trimestre.
Responde en Markdown profesional."""


def financial_analysis(context_name: str, income: float, expense: float, balance: float) -> str:
    return (
        f"Analiza las finanzas de {context_name}: Ingresos Q{income:g}, Egresos Q{expense:g}, Balance Q{balance:g}.\n"
        f"Proporciona un dictamen ejecutivo en Markdown resaltando riesgos y oportunidades de ahorro."
    )


def cash_flow_prediction(transactions: Iterable[Transaction]) -> str:
    history = [t.to_dict() for t in transactions]
    return (
        f"Predice el flujo de caja para los próximos 7 días basado en este historial: {_dumps(history)}.\n"
        f"Responde estrictamente en JSON con un objeto que contenga un array 'prediction'."
    )


def budget_phases(project_name: str, items: Iterable[BudgetItem]) -> str:
    rows = [i.to_dict() for i in items]
    return f"""Actúa como un Senior Estimator de construcción. Analiza estos renglones: {_dumps(rows)}.
Divide el proyecto "{project_name}" en fases lógicas (Cimentación, Estructura, Muros, Acabados, etc.).
Para cada fase, calcula:
1. Costo Directo (suma de renglones asignados).
2. Costo Indirecto (15%).
3. Duración estimada en días calendario.
4. Breve justificación técnica.

Responde exclusivamente en JSON con esta estructura:
{{
  "phases": [
    {{ "name": "string", "directCost": number, "indirectCost": number, "durationDays": number, "description": "string" }}
  ],
  "totalEstimatedDuration": number,
  "aiSummary": "string"
}}"""


def project_timeline(project: Project) -> str:
    return f"""Senior Construction Manager Simulation:
Analiza el proyecto "{project.name}" de tipología {project.typology.value} con {project.construction_area:g}m2 de construcción sobre un terreno de {project.land_area:g}m2.
Genera un cronograma técnico maestro de 8 hitos en JSON para un diagrama de Gantt.

Esquema JSON:
{{
  "milestones": [
    {{ "name": "string", "startPercent": number, "durationPercent": number, "description": "string", "color": "hex_color", "isCritical": boolean }}
  ]
}}"""


def purchasing_request(
    message: str,
    specs: Optional[str],
    transactions: Iterable[Transaction],
    projects: Iterable[Project],
) -> str:
    history = [
        {
            "desc": t.description,
            "precio": t.cost,
            "unidad": t.unit,
            "cat": t.category,
            "fecha": t.date,
            "prov": t.provider or "N/A",
        }
        for t in transactions
    ]
    projects_list = [{"n": p.name, "t": p.typology.value, "s": p.status.value} for p in projects]

    text = f'CONSULTA DE REQUISICIÓN: "{message}"'
    if specs:
        text += f"\n\nDATOS TÉCNICOS ADJUNTOS:\n{specs}"
    text += f"""

--- CONTEXTO OPERATIVO M&S ---
HISTORIAL DE COMPRAS (Últimas 50): {_dumps(history)}
PROYECTOS ACTIVOS: {_dumps(projects_list)}

TAREA CRÍTICA:
1. Usa Google Search para encontrar el precio MÁS BAJO actual en Guatemala para los insumos mencionados.
2. Compara el precio de mercado vs. el precio histórico de la empresa.
3. Si el precio actual es >10% mayor al histórico, alerta sobre SOBRECOSTO y sugiere proveedores alternos.
4. Si el precio actual es <10% menor al histórico, sugiere COMPRA POR VOLUMEN inmediata.
5. Identifica riesgos de desabastecimiento (ej. huelgas, escasez de clinker para cemento, fluctuación del acero).
6. Responde con secciones: [ANÁLISIS DE MERCADO], [COMPARATIVA HISTÓRICA], [ALERTAS DE RIESGO] y [RECOMENDACIÓN ESTRATÉGICA]."""
    return text


def image_edit(instruction: str) -> str:
    return f"Please edit this image according to the following instruction: {instruction}. Return the modified image."
