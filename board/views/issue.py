# ============================================
# board/views/issue.py
# ============================================
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from board.serializers.issue import (
    IssueWriteSerializer,
    IssueMoveSerializer,
    IssueOutputSerializer,
)
from board.selectors.issue import IssueSelector
from board.services.guard import CreateGuard, client_id_for
from board.services.issue import IssueService
from .utils import (
    SERVICE_ERRORS, extend_schema, extend_schema_view, OpenApiResponse,
    error_response, not_found, path_int, q_str, std_errors,
)


@extend_schema_view(
    get=extend_schema(
        tags=["Issue"],
        summary="List issues, newest first",
        parameters=[q_str("search", "Case-insensitive substring of the summary")],
        responses={200: OpenApiResponse(IssueOutputSerializer(many=True)), **std_errors()},
    ),
    post=extend_schema(
        tags=["Issue"],
        summary="Create an issue in the backlog",
        request=IssueWriteSerializer,
        responses={
            201: OpenApiResponse(IssueOutputSerializer),
            **std_errors({409: OpenApiResponse(description="A create is already in flight")}),
        },
    ),
)
class IssueListCreateAPIView(APIView):
    """
    GET: List issues (optionally filtered by ?search=)
    POST: Create a new issue

    Request body (POST):
    - summary, description, acceptance_criteria: string (required)
    - issue_type: Story/Bug/Task/Spike (required)
    - priority: P0/P1/P2/P3 (required)
    - story_points: number >= 0 (optional)
    - start_date, due_date: YYYY-MM-DD (optional)
    - sprint: string (optional)

    Send an X-Client-Id header to have a second create from the same client
    rejected with 409 while the first is still running.
    """

    def get(self, request):
        try:
            issues = IssueSelector.get_issues_list(search=request.query_params.get('search'))
        except SERVICE_ERRORS as exc:
            return error_response(exc)

        serializer = IssueOutputSerializer(issues, many=True)
        return Response(serializer.data)

    def post(self, request):
        serializer = IssueWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            with CreateGuard(client_id_for(request)):
                issue = IssueService.create_issue(**serializer.to_service_kwargs())
        except SERVICE_ERRORS as exc:
            return error_response(exc)

        return Response(IssueOutputSerializer(issue).data, status=status.HTTP_201_CREATED)


@extend_schema_view(
    get=extend_schema(
        tags=["Issue"],
        summary="Retrieve an issue",
        parameters=[path_int("issue_id", "Issue ID")],
        responses={200: OpenApiResponse(IssueOutputSerializer), **std_errors()},
    ),
    put=extend_schema(
        tags=["Issue"],
        summary="Edit an issue (key, status and timestamps are kept)",
        parameters=[path_int("issue_id", "Issue ID")],
        request=IssueWriteSerializer,
        responses={200: OpenApiResponse(IssueOutputSerializer), **std_errors()},
    ),
    delete=extend_schema(
        tags=["Issue"],
        summary="Delete an issue",
        parameters=[path_int("issue_id", "Issue ID")],
        responses={204: OpenApiResponse(None, description="Deleted"), **std_errors()},
    ),
)
class IssueDetailAPIView(APIView):
    """
    GET: Retrieve issue details
    PUT: Update issue
    DELETE: Delete issue
    """

    def get(self, request, issue_id):
        issue = IssueSelector.get_issue_by_id(issue_id)
        if not issue:
            return not_found()

        return Response(IssueOutputSerializer(issue).data)

    def put(self, request, issue_id):
        issue = IssueSelector.get_issue_by_id(issue_id)
        if not issue:
            return not_found()

        serializer = IssueWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            updated_issue = IssueService.update_issue(
                issue_id=issue.id,
                **serializer.to_service_kwargs()
            )
        except SERVICE_ERRORS as exc:
            return error_response(exc)

        return Response(IssueOutputSerializer(updated_issue).data)

    def delete(self, request, issue_id):
        issue = IssueSelector.get_issue_by_id(issue_id)
        if not issue:
            return not_found()

        try:
            IssueService.delete_issue(issue_id=issue.id)
        except SERVICE_ERRORS as exc:
            return error_response(exc)

        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    tags=["Issue"],
    summary="Move an issue to any status",
    parameters=[path_int("issue_id", "Issue ID")],
    request=IssueMoveSerializer,
    responses={200: OpenApiResponse(IssueOutputSerializer), **std_errors()},
)
class IssueMoveAPIView(APIView):
    """POST: overwrite the issue's status; only status changes"""

    def post(self, request, issue_id):
        issue = IssueSelector.get_issue_by_id(issue_id)
        if not issue:
            return not_found()

        serializer = IssueMoveSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            moved = IssueService.move_issue(
                issue_id=issue.id,
                status=serializer.validated_data['status']
            )
        except SERVICE_ERRORS as exc:
            return error_response(exc)

        return Response(IssueOutputSerializer(moved).data)


@extend_schema(
    tags=["Issue"],
    summary="Duplicate an issue under a new key",
    parameters=[path_int("issue_id", "Issue ID")],
    request=None,
    responses={201: OpenApiResponse(IssueOutputSerializer), **std_errors()},
)
class IssueDuplicateAPIView(APIView):
    """POST: copy every editable field and the status under the next key"""

    def post(self, request, issue_id):
        issue = IssueSelector.get_issue_by_id(issue_id)
        if not issue:
            return not_found()

        try:
            copy = IssueService.duplicate_issue(issue=issue)
        except SERVICE_ERRORS as exc:
            return error_response(exc)

        return Response(IssueOutputSerializer(copy).data, status=status.HTTP_201_CREATED)
