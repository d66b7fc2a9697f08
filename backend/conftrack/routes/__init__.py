"""
ConfTrack Backend: API Routes Package
=====================================

Route Inventory:
    - conferences.py:   /conferences             (CRUD)
    - recordings.py:    /recordings              (CRUD)
                        POST /recordings/webhook/recording-started
    - sessions.py:      /sessions                (CRUD)
    - participants.py:  /participants            (CRUD)
    - health.py:        GET /health
    - crud.py:          build_crud_router() shared by the four resources

Routes stay thin: extract request data, call a service, return its result.
"""
