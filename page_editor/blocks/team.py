"""Bloc Équipe — photos, rôles, bios, liens sociaux."""
from typing import Dict, List

from ..core.schemas import BlockDefinition
from .base import BlockProps, PropsItem


class TeamMember(PropsItem):
    name: str = ""
    role: str = ""
    bio: str = ""
    photo: str = ""
    social: Dict[str, str] = {}


class TeamProps(BlockProps):
    members: List[TeamMember] = []
    layout: str = "grid"
    show_bios: bool = False
    show_social: bool = False


DEFINITION = BlockDefinition(
    id="team-members",
    type="team",
    category="business",
    name="Team Members",
    description="Showcase your team with photos and bios",
    default_props={
        "members": [
            {
                "name": "Dr. Emily Chen",
                "role": "Lead Specialist",
                "bio": "Over 10 years of experience in the field",
                "photo": "https://images.unsplash.com/photo-1559839734-2b71ea197ec2?w=300&h=300&fit=crop&crop=face",
                "social": {"linkedin": "#", "twitter": "#"},
            },
            {
                "name": "Michael Rodriguez",
                "role": "Senior Consultant",
                "bio": "Expert in customer relations and project management",
                "photo": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=300&h=300&fit=crop&crop=face",
                "social": {"linkedin": "#"},
            },
        ],
        "layout": "grid",
        "showBios": True,
        "showSocial": True,
    },
)
