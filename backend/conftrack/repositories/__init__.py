"""
ConfTrack Backend: Repository Instances
=======================================

One Repository per entity. All four resources, the webhook included, read
and write through these instances.
"""

from conftrack.models import Conference, ConferenceSession, Participant, Recording
from conftrack.repositories.base import Repository

conference_repository: Repository[Conference] = Repository(Conference, "Conference")
recording_repository: Repository[Recording] = Repository(Recording, "Recording")
session_repository: Repository[ConferenceSession] = Repository(ConferenceSession, "Session")
participant_repository: Repository[Participant] = Repository(Participant, "Participant")

__all__ = [
    "Repository",
    "conference_repository",
    "participant_repository",
    "recording_repository",
    "session_repository",
]
