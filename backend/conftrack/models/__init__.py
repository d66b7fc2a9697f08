# Importing every model registers it on Base.metadata (Alembic, create_all)
from conftrack.models.conference import Conference
from conftrack.models.participant import Participant
from conftrack.models.recording import Recording
from conftrack.models.session import ConferenceSession

__all__ = ["Conference", "ConferenceSession", "Participant", "Recording"]
