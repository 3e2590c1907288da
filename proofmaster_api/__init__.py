"""ProofMaster study API (FastAPI)."""
