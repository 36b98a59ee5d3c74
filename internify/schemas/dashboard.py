from pydantic import BaseModel

class DashboardStats(BaseModel):
    total_interns: int
    generated_certs: int
    verifications: int
    active_internships: int
