from pydantic import BaseModel


class ServiceAccountState(BaseModel):
    account_id: str
    project_id: str
    exists: bool

    @property
    def email(self) -> str:
        return f"{self.account_id}@{self.project_id}.iam.gserviceaccount.com"

    @property
    def member(self) -> str:
        return f"serviceAccount:{self.email}"
