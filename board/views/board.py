# ============================================
# board/views/board.py
# ============================================
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from board.serializers.issue import BoardOutputSerializer
from board.selectors.issue import IssueSelector
from board.workflow import BOARD_VIEWS, STANDARD_BOARD
from .utils import (
    SERVICE_ERRORS, extend_schema, OpenApiResponse, error_response, q_str, std_errors,
)


@extend_schema(
    tags=["Board"],
    summary="Issues partitioned into the columns of a board view",
    parameters=[
        q_str("view", "Board view (default: standard)", enum=list(BOARD_VIEWS)),
        q_str("search", "Case-insensitive substring of the summary"),
    ],
    responses={200: OpenApiResponse(BoardOutputSerializer), **std_errors()},
)
class BoardAPIView(APIView):
    """
    GET: columns of the requested view with their issues, counts,
    forward-move labels and empty-state text.
    """

    def get(self, request):
        view_name = request.query_params.get('view') or STANDARD_BOARD.name
        if view_name not in BOARD_VIEWS:
            return Response(
                {'detail': f"Unknown board view: {view_name}"},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            snapshot = IssueSelector.get_board(view_name, request.query_params.get('search'))
        except SERVICE_ERRORS as exc:
            return error_response(exc)

        return Response(BoardOutputSerializer(snapshot).data)
