"""
ConfTrack Backend: Services Layer
=================================

Service Inventory:
    - ResourceService: CRUD orchestration, one instance per resource
    - RecordingWebhookService: recording.started reconciliation (Recording
      insert + Session recording_url patch)

Services accept an AsyncSession per call and keep no state between calls.
"""
