from __future__ import annotations

import json
import logging
from typing import Any, Optional

from ..budgets.model import BudgetItem
from ..core.exceptions import BadUpstreamResponseError, UnprocessableError, ValidationError
from ..finance.service import CONSOLIDATED, FinanceService
from ..projects.service import ProjectService
from ..reports.service import MetricsService
from . import prompts
from .gemini import GeminiService
from .model import FLASH_MODEL, IMAGE_MODEL, PRO_MODEL, GenerateRequest, data_url_to_inline_data

logger = logging.getLogger(__name__)

JSON_CONFIG = {"responseMimeType": "application/json"}
PURCHASING_HISTORY_SIZE = 50
PREDICTION_HISTORY_SIZE = 15


def _parse_json(text: Optional[str], default: dict[str, Any]) -> dict[str, Any]:
    if not text:
        return default
    try:
        data = json.loads(text)
    except ValueError as e:
        logger.warning("model answered invalid JSON: %.200s", text)
        raise BadUpstreamResponseError("La IA devolvió una respuesta que no es JSON válido.") from e
    if not isinstance(data, dict):
        raise BadUpstreamResponseError("La IA devolvió una respuesta que no es JSON válido.")
    return data


def _inline(data_url: str) -> dict[str, Any]:
    try:
        return {"inlineData": data_url_to_inline_data(data_url)}
    except ValueError as e:
        raise ValidationError(str(e)) from e


class InsightService:
    """AI-assisted views: every method builds a prompt from workspace data and asks Gemini."""

    def __init__(
        self,
        gemini: GeminiService,
        *,
        projects: ProjectService,
        finance: FinanceService,
        metrics: MetricsService,
    ):
        self._gemini = gemini
        self._projects = projects
        self._finance = finance
        self._metrics = metrics

    def _ask(self, model: str, *, prompt: Optional[str] = None, parts: Optional[list] = None, config=None):
        return self._gemini.generate(GenerateRequest(model=model, prompt=prompt, parts=parts, config=config))

    def executive_briefing(self) -> str:
        result = self._ask(FLASH_MODEL, prompt=prompts.executive_briefing(self._metrics.workspace_metrics()))
        return result.text or "Sin resumen disponible."

    def executive_report(self) -> str:
        result = self._ask(FLASH_MODEL, prompt=prompts.executive_report(self._metrics.workspace_metrics()))
        return result.text or "Error al generar análisis."

    def financial_analysis(self, project_id: str = CONSOLIDATED) -> str:
        if project_id and project_id != CONSOLIDATED:
            context_name = self._projects.get(project_id).name
        else:
            context_name = "GLOBAL CONSOLIDADO"
        m = self._finance.metrics(project_id=project_id or CONSOLIDATED)
        result = self._ask(PRO_MODEL, prompt=prompts.financial_analysis(context_name, m.income, m.expense, m.balance))
        return result.text or "Sin análisis disponible."

    def cash_flow_prediction(self, project_id: str = CONSOLIDATED) -> list[Any]:
        recent = self._finance.list_transactions(project_id=project_id or CONSOLIDATED)[:PREDICTION_HISTORY_SIZE]
        result = self._ask(FLASH_MODEL, prompt=prompts.cash_flow_prediction(recent), config=JSON_CONFIG)
        prediction = _parse_json(result.text, {"prediction": []}).get("prediction")
        return prediction if isinstance(prediction, list) else []

    def budget_phases(self, project_id: Optional[str], raw_items: Any) -> dict[str, Any]:
        if not isinstance(raw_items, list):
            raise ValidationError("items debe ser una lista")
        items = [BudgetItem.from_dict(i) for i in raw_items if isinstance(i, dict)]
        active = [i for i in items if i.total > 0]
        if not active:
            raise ValidationError("El presupuesto no tiene renglones con cantidades válidas para analizar.")
        project_name = self._projects.get(project_id).name if project_id else "Sin proyecto"
        result = self._ask(FLASH_MODEL, prompt=prompts.budget_phases(project_name, active), config=JSON_CONFIG)
        return _parse_json(result.text, {})

    def project_timeline(self, project_id: str) -> list[Any]:
        project = self._projects.get(project_id)
        result = self._ask(FLASH_MODEL, prompt=prompts.project_timeline(project), config=JSON_CONFIG)
        milestones = _parse_json(result.text, {"milestones": []}).get("milestones")
        return milestones if isinstance(milestones, list) else []

    def purchasing_advice(self, message: str, *, specs: Optional[str] = None, image: Optional[str] = None) -> str:
        message = (message or "").strip()
        if not message and not image:
            raise ValidationError("Describe la requisición o adjunta una imagen.")

        history = self._finance.all_transactions()[-PURCHASING_HISTORY_SIZE:]
        projects = self._projects.list_projects()
        parts: list[dict[str, Any]] = [{"text": prompts.purchasing_request(message, specs, history, projects)}]
        if image:
            parts.append(_inline(image))

        result = self._ask(
            PRO_MODEL,
            parts=parts,
            config={
                "systemInstruction": prompts.PURCHASING_SYSTEM_INSTRUCTION,
                "tools": [{"googleSearch": {}}],
            },
        )
        return result.text or "Análisis de mercado y riesgos finalizado. Por favor, revise las recomendaciones adjuntas."

    def edit_image(self, image: str, instruction: str) -> str:
        """Returns the first image of the answer as a data URL."""
        instruction = (instruction or "").strip()
        if not image or not instruction:
            raise ValidationError("Imagen e instrucción son obligatorias")
        parts = [_inline(image), {"text": prompts.image_edit(instruction)}]
        result = self._ask(IMAGE_MODEL, parts=parts)
        if not result.images:
            raise UnprocessableError("El modelo no devolvió una imagen.")
        return result.images[0].to_data_url()
