"""
Seed data used when the event collection is empty.
"""

import copy
from typing import Any, Dict, List

DEFAULT_EVENTS: List[Dict[str, Any]] = [
    {
        "id": "event005",
        "title": "8時だよ全員集合朝会",
        "description": "毎日の朝のミーティングです。今日の予定や目標を共有しましょう。",
        "date": "2025-09-04T08:00:00",
        "location": "オンライン（Zoom）",
        "price": "無料",
        "capacity": 50,
        "participants": [],
        "checkedInUsers": [],
        "createdBy": "admin@example.com",
        "createdAt": "2025-09-04T07:00:00",
        "category": "meeting",
    },
    {
        "id": "event1756988138911",
        "title": "コミュニティイベント",
        "description": "みんなで交流しましょう！",
        "date": "2025-09-05T19:00:00",
        "location": "東京",
        "price": "無料",
        "capacity": 30,
        "participants": ["tomura@hackjpn.com"],
        "checkedInUsers": [],
        "createdBy": "tomura@hackjpn.com",
        "createdAt": "2025-09-04T12:00:00",
        "category": "community",
    },
]


def default_events() -> List[Dict[str, Any]]:
    """Return a fresh copy of the seed events, safe to mutate."""
    return copy.deepcopy(DEFAULT_EVENTS)
