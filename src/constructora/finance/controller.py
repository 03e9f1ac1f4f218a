from __future__ import annotations

from datetime import date

from flask import Flask, Response, jsonify, request

from ..auth.decorators import admin_required
from ..common.http import json_body
from ..container import Container
from ..core.constants import CATEGORIES_EXPENSE, CATEGORIES_INCOME, GUATEMALA_UNITS
from .service import CONSOLIDATED, compute_metrics, daily_series


def register(app: Flask, container: Container) -> None:
    service = container.finance_service

    def _filters():
        return request.args.get("projectId") or CONSOLIDATED, request.args.get("q", "")

    @app.route("/api/finance/transactions", methods=["GET"], endpoint="finance_list")
    @admin_required
    def list_transactions():
        project_id, search = _filters()
        txs = service.list_transactions(project_id=project_id, search=search)
        return jsonify(
            {
                "transactions": [t.to_dict() for t in txs],
                "metrics": compute_metrics(txs).to_dict(),
                "chart": daily_series(txs),
            }
        )

    @app.route("/api/finance/transactions", methods=["POST"], endpoint="finance_create")
    @admin_required
    def create_transaction():
        tx = service.create(json_body())
        return jsonify({"transaction": tx.to_dict()}), 201

    @app.route("/api/finance/transactions.csv", methods=["GET"], endpoint="finance_export")
    @admin_required
    def export_transactions():
        project_id, search = _filters()
        data = service.export_csv(service.list_transactions(project_id=project_id, search=search))
        filename = f"finanzas_{date.today().isoformat()}.csv"
        return Response(
            data,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/finance/catalog", methods=["GET"], endpoint="finance_catalog")
    @admin_required
    def catalog():
        return jsonify(
            {"units": GUATEMALA_UNITS, "expenseCategories": CATEGORIES_EXPENSE, "incomeCategories": CATEGORIES_INCOME}
        )

    @app.route("/api/finance/analysis", methods=["POST"], endpoint="finance_analysis")
    @admin_required
    def analysis():
        project_id = json_body().get("projectId") or CONSOLIDATED
        return jsonify({"analysis": container.insight_service.financial_analysis(project_id)})

    @app.route("/api/finance/prediction", methods=["POST"], endpoint="finance_prediction")
    @admin_required
    def prediction():
        project_id = json_body().get("projectId") or CONSOLIDATED
        return jsonify({"prediction": container.insight_service.cash_flow_prediction(project_id)})
