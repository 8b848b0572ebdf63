from api.routes.question import QuestionApiController
from api.routes.submission import SubmissionApiController

__all__ = ["QuestionApiController", "SubmissionApiController"]
