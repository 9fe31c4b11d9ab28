"""
Admin dashboard schemas.
"""
from hirehub.schemas.base import BaseSchema


class StatsResponse(BaseSchema):
    total_users: int
    total_jobs: int
    total_applications: int
    total_employers: int
    total_job_seekers: int
