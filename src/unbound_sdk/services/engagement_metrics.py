# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Engagement metrics facade: contact-center queue and agent statistics.

Everything goes through GET /engagementMetrics/; the shortcuts only choose
which sections the server includes. Id lists are sent comma-separated.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..interface import BaseService
from ..validation import Param, Schema, validate_params

METRICS_PATH = "/engagementMetrics/"

METRICS_SCHEMA = Schema(
    queue_ids=Param("array", default=()),
    statuses=Param("array", default=()),
    user_ids=Param("array", default=()),
    include_summary=Param("boolean", default=True),
    include_by_queue=Param("boolean", default=True),
    include_queue_performance=Param("boolean", default=False),
    include_agent_performance=Param("boolean", default=False),
)

_LIST_PARAMS = ("queueIds", "statuses", "userIds")

Ids = Sequence[str]


class EngagementMetricsService(BaseService):
    name = "engagement_metrics"

    async def get_metrics(self, **options: Any) -> Any:
        """Fetch engagement metrics.

        Args:
            **options: queue_ids, statuses, user_ids (lists of strings) and
                the include_summary, include_by_queue,
                include_queue_performance, include_agent_performance flags.
        """
        query = validate_params(options, METRICS_SCHEMA)
        for key in _LIST_PARAMS:
            query[key] = ",".join(str(v) for v in query[key])
        return await self.sdk._fetch(METRICS_PATH, "GET", {"query": query})

    async def get_summary(self, queue_ids: Ids = (), statuses: Ids = ()) -> Any:
        return await self.get_metrics(
            queue_ids=queue_ids,
            statuses=statuses,
            include_summary=True,
            include_by_queue=False,
            include_queue_performance=False,
            include_agent_performance=False,
        )

    async def get_by_queue(self, queue_ids: Ids = (), statuses: Ids = ()) -> Any:
        return await self.get_metrics(
            queue_ids=queue_ids,
            statuses=statuses,
            include_summary=False,
            include_by_queue=True,
            include_queue_performance=False,
            include_agent_performance=False,
        )

    async def get_queue_performance(self, queue_ids: Ids = ()) -> Any:
        return await self.get_metrics(
            queue_ids=queue_ids,
            include_summary=False,
            include_by_queue=False,
            include_queue_performance=True,
            include_agent_performance=False,
        )

    async def get_agent_performance(self, queue_ids: Ids = (), user_ids: Ids = ()) -> Any:
        return await self.get_metrics(
            queue_ids=queue_ids,
            user_ids=user_ids,
            include_summary=False,
            include_by_queue=False,
            include_queue_performance=False,
            include_agent_performance=True,
        )

    async def get_dashboard_metrics(
        self, queue_ids: Ids = (), statuses: Ids = (), user_ids: Ids = ()
    ) -> Any:
        return await self.get_metrics(
            queue_ids=queue_ids,
            statuses=statuses,
            user_ids=user_ids,
            include_summary=True,
            include_by_queue=True,
            include_queue_performance=True,
            include_agent_performance=True,
        )
