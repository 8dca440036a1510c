"""Service layer exports for candidate and history helpers."""

from .candidate_service import CandidateService
from .history_service import HistoryService
