"""Request/response models shared by the API routers.

JSON keys are camelCase (the frontend's convention); inputs also accept
snake_case.  Envelopes follow ``{data, success, message, count}``.
"""

from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.content_view import (
    AssessmentView,
    CourseView,
    ModuleTree,
    ModuleView,
    VideoView,
)
from app.models.course import Assessment, Course, Module, Question, Video
from app.services.purchase_service import PaymentFailure


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Inputs ---


class CourseIn(ApiModel):
    title: str = Field(min_length=1)
    description: str = ""
    price: float | None = Field(default=None, ge=0)
    thumbnail_url: str | None = None

    def to_model(self) -> Course:
        return Course.new(
            title=self.title,
            description=self.description,
            price=self.price,
            thumbnail_url=self.thumbnail_url,
        )


class ModuleIn(ApiModel):
    title: str = Field(min_length=1)
    description: str = ""

    def to_model(self) -> Module:
        return Module.new(title=self.title, description=self.description)


class VideoIn(ApiModel):
    title: str = Field(min_length=1)
    video_url: str = ""
    duration_seconds: int | None = Field(default=None, ge=0)

    def to_model(self) -> Video:
        return Video.new(
            title=self.title,
            video_url=self.video_url,
            duration_seconds=self.duration_seconds,
        )


class AssessmentIn(ApiModel):
    title: str = Field(min_length=1)
    description: str = ""

    def to_model(self) -> Assessment:
        return Assessment.new(title=self.title, description=self.description)


class QuestionIn(ApiModel):
    text: str = Field(min_length=1)
    options: list[str] = Field(default_factory=list)
    correct_answer: str | None = None

    def to_model(self) -> Question:
        return Question.new(
            text=self.text,
            options=tuple(self.options),
            correct_answer=self.correct_answer,
        )


class PaymentVerifyIn(ApiModel):
    order_id: str | None = None
    payment_id: str | None = None
    signature: str | None = None


# --- Content outputs ---


class CourseOut(ApiModel):
    id: int
    title: str
    description: str
    price: float | None = None
    thumbnail_url: str | None = None

    @classmethod
    def from_model(cls, c: Course) -> CourseOut:
        return cls(
            id=c.id,
            title=c.title,
            description=c.description,
            price=c.price,
            thumbnail_url=c.thumbnail_url,
        )


class VideoOut(ApiModel):
    id: int
    module_id: int
    title: str
    video_url: str
    duration_seconds: int | None = None
    locked: bool = False

    @classmethod
    def from_model(cls, v: Video, *, locked: bool = False) -> VideoOut:
        return cls(
            id=v.id,
            module_id=v.module_id,
            title=v.title,
            video_url=v.video_url,
            duration_seconds=v.duration_seconds,
            locked=locked,
        )

    @classmethod
    def from_view(cls, view: VideoView) -> VideoOut:
        return cls.from_model(view.video, locked=view.locked)


class AssessmentOut(ApiModel):
    id: int
    module_id: int
    title: str
    description: str
    locked: bool = False

    @classmethod
    def from_model(cls, a: Assessment, *, locked: bool = False) -> AssessmentOut:
        return cls(
            id=a.id,
            module_id=a.module_id,
            title=a.title,
            description=a.description,
            locked=locked,
        )

    @classmethod
    def from_view(cls, view: AssessmentView) -> AssessmentOut:
        return cls.from_model(view.assessment, locked=view.locked)


class QuestionOut(ApiModel):
    id: int
    assessment_id: int
    text: str
    options: list[str]
    correct_answer: str | None = None

    @classmethod
    def from_model(cls, q: Question) -> QuestionOut:
        return cls(
            id=q.id,
            assessment_id=q.assessment_id,
            text=q.text,
            options=list(q.options),
            correct_answer=q.correct_answer,
        )


class ModuleOut(ApiModel):
    id: int
    course_id: int
    title: str
    description: str
    locked: bool = False
    videos: list[VideoOut] = Field(default_factory=list)
    assessments: list[AssessmentOut] = Field(default_factory=list)

    @classmethod
    def from_model(cls, m: Module) -> ModuleOut:
        return cls(
            id=m.id, course_id=m.course_id, title=m.title, description=m.description
        )

    @classmethod
    def from_tree(cls, tree: ModuleTree) -> ModuleOut:
        out = cls.from_model(tree.module)
        out.videos = [VideoOut.from_model(v) for v in tree.videos]
        out.assessments = [AssessmentOut.from_model(a) for a in tree.assessments]
        return out

    @classmethod
    def from_view(cls, view: ModuleView) -> ModuleOut:
        out = cls.from_model(view.module)
        out.locked = view.locked
        out.videos = [VideoOut.from_view(v) for v in view.videos]
        out.assessments = [AssessmentOut.from_view(a) for a in view.assessments]
        return out


class CourseDetailOut(CourseOut):
    subscribed: bool = False
    modules: list[ModuleOut] = Field(default_factory=list)

    @classmethod
    def from_view(cls, view: CourseView) -> CourseDetailOut:
        base = CourseOut.from_model(view.course)
        return cls(
            **base.model_dump(),
            subscribed=view.subscribed,
            modules=[ModuleOut.from_view(m) for m in view.modules],
        )


# --- Envelopes ---


class CourseListResponse(ApiModel):
    data: list[CourseDetailOut]
    success: bool = True
    message: str = "Courses retrieved successfully"
    count: int


class CourseResponse(ApiModel):
    data: CourseDetailOut
    success: bool = True
    message: str = "Course retrieved successfully"


class ModuleListResponse(ApiModel):
    data: list[ModuleOut]
    success: bool = True
    count: int


class ModuleResponse(ApiModel):
    data: ModuleOut
    success: bool = True


class VideoListResponse(ApiModel):
    data: list[VideoOut]
    success: bool = True
    count: int


class AssessmentListResponse(ApiModel):
    data: list[AssessmentOut]
    success: bool = True
    count: int


class QuestionListResponse(ApiModel):
    assessment_id: int
    questions: list[QuestionOut]
    success: bool = True
    count: int


# --- Purchase outputs ---


class OrderResponse(ApiModel):
    success: bool = True
    message: str
    order_id: str
    already_purchased: bool
    user_id: int
    course_id: int
    amount: float | None = None
    currency: str | None = None


class VerificationResponse(ApiModel):
    success: bool
    message: str
    verified: bool
    order_id: str | None = None
    payment_id: str | None = None
    course_unlocked: bool | None = None
    user_id: int | None = None
    course_id: int | None = None


class PurchaseCompleteResponse(ApiModel):
    success: bool = True
    message: str
    order_id: str | None = None
    payment_id: str | None = None
    user_id: int
    course_id: int
    purchase_complete: bool = True


class PurchaseStatusResponse(ApiModel):
    success: bool = True
    message: str
    user_id: int
    course_id: int
    purchased: bool
    purchase_date: datetime.datetime | None = None


class FailureResponse(ApiModel):
    success: bool = False
    message: str
    error: str | None = None

    @classmethod
    def from_failure(cls, failure: PaymentFailure) -> FailureResponse:
        return cls(message=failure.message, error=failure.error)
