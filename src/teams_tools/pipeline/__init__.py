from teams_tools.pipeline.articles import ArticleImagePipeline, fetch_articles, print_report
from teams_tools.pipeline.base import ClientFactory, Pipeline
from teams_tools.pipeline.sme import (
    SmeAssignmentPipeline,
    assign_group_to_tag,
    create_user_group,
    lookup_user_id,
    split_emails,
)

__all__ = [
    "ArticleImagePipeline",
    "ClientFactory",
    "Pipeline",
    "SmeAssignmentPipeline",
    "assign_group_to_tag",
    "create_user_group",
    "fetch_articles",
    "lookup_user_id",
    "print_report",
    "split_emails",
]
