from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from ..api.serializers import LoginSerializer, SignupSerializer, UserSerializer
from ..services.account import AccountService

__all__ = ["SignupView", "LoginView"]


class SignupView(APIView):
    # Body carries email/password of the account being created, not of a caller.
    authentication_classes = []
    permission_classes = [AllowAny]
    service_class = AccountService

    def post(self, request):
        serializer = SignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = self.service_class().signup(serializer.validated_data)
        return Response(
            {"message": "User created successfully", "user": UserSerializer(user).data},
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]
    service_class = AccountService

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        identity = self.service_class().login(
            serializer.validated_data["email"],
            serializer.validated_data["password"],
        )
        return Response({"message": "Login successful", "user": identity.as_dict()})
