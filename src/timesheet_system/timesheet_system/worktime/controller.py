from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.validators import require_non_empty
from ..core.enums import TimeRange
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container) -> None:
    @app.route("/api/work-time-stats", methods=["GET"], endpoint="api_work_time_stats")
    def api_work_time_stats():
        """Weekly/monthly work-time statistics for one user."""
        try:
            user_id = require_non_empty(request.args.get("user_id") or request.args.get("userId"), "user_id")
            time_range = TimeRange.parse(request.args.get("timeRange"))

            date_s = (request.args.get("date") or "").strip()
            if date_s:
                try:
                    anchor = parse_iso_date(date_s)
                except ValueError:
                    raise ValidationError("Invalid date (YYYY-MM-DD)")
            else:
                anchor = now_local(container.work_time_service.rules.tz).date()

            data = container.work_time_service.build_report(user_id=user_id, time_range=time_range, anchor=anchor)
            return jsonify({"success": True, "data": data}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Failed to compute work-time stats")
            return jsonify({"success": False, "message": "Failed to compute work-time stats"}), 500
