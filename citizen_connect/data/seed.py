"""Startup content loaded into the repositories.

Each call builds fresh models with fresh ids so two stores never share
mutable entities.
"""

from __future__ import annotations

from ..core.models import Activity, Issue, Politician, Update

_AVATAR = "data:image/svg+xml;base64,PHN2Zy..."


def seed_politicians() -> list[Politician]:
    return [
        Politician(
            name="Mayor Robert Johnson",
            title="Mayor of Springfield",
            party="Democratic Party",
            messages=142,
            rating=4.2,
            response_rate=89,
            avatar=_AVATAR,
        ),
        Politician(
            name="Sarah Davis",
            title="City Council Member - District 3",
            party="Independent",
            messages=98,
            rating=4.7,
            response_rate=95,
            avatar=_AVATAR,
        ),
        Politician(
            name="Carlos Martinez",
            title="State Representative",
            party="Republican Party",
            messages=76,
            rating=3.9,
            response_rate=78,
            avatar=_AVATAR,
        ),
    ]


def seed_updates() -> list[Update]:
    return [
        Update(
            type="policy",
            date="Today, 2:30 PM",
            title="New Public Transportation Initiative",
            body="City Council approved $2.5M budget...",
            author="Mayor Robert Johnson",
            likes=34,
            comments=12,
        ),
        Update(
            type="events",
            date="Tomorrow, 6:00 PM",
            title="Town Hall Meeting: Community Safety",
            body="Join us for an open discussion...",
            author="Sarah Davis",
            likes=12,
            comments=4,
        ),
        Update(
            type="announcements",
            date="2 days ago",
            title="Road Maintenance Schedule",
            body="Main Street will undergo scheduled maintenance",
            author="Dept. of Public Works",
            likes=8,
            comments=2,
        ),
    ]


def seed_issues() -> list[Issue]:
    return [
        Issue(
            title="Pothole on Main Street causing traffic issues",
            category="infrastructure",
            description="Large pothole near intersection...",
            location="Main St",
            status="open",
            author="Sarah Johnson",
            date="3 days ago",
            votes=24,
            comments=8,
        ),
        Issue(
            title="Long wait times at Community Health Center",
            category="healthcare",
            description="Patients experiencing 3-4 hour wait times...",
            location="Community Health Center",
            status="in-progress",
            author="Michael Chen",
            date="1 week ago",
            votes=67,
            comments=23,
            politician_response=(
                "We're working with the health department to address staffing issues."
            ),
        ),
        Issue(
            title="Illegal dumping in Riverside Park",
            category="environment",
            description="Construction waste and household items dumped...",
            location="Riverside Park",
            status="resolved",
            author="Environmental Group",
            date="2 weeks ago",
            votes=89,
            comments=15,
            resolution="Cleanup completed and additional cameras installed.",
        ),
    ]


def seed_activities() -> list[Activity]:
    return [
        Activity(
            description="New issue reported: Road maintenance on Main St",
            time="2 hours ago",
            icon="plus-circle",
        ),
        Activity(
            description="Issue resolved: Street lighting fixed",
            time="5 hours ago",
            icon="check-circle",
        ),
        Activity(
            description="Mayor Johnson responded to healthcare concern",
            time="1 day ago",
            icon="comment",
        ),
    ]
