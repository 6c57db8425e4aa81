"""Cliente do recurso User.

Cada operação é só configuração: método, caminho, corpo e tabela de
status. Toda falha chega ao caller como outcome, com o texto exato
que a tela exibe.

Endpoints (relativos a USER_API_URL):
    GET    /all                  lista usuários
    POST   /login                autenticação por email/senha
    POST   /                     criação (id gerado no cliente)
    PUT    /{id}                 atualização de perfil
    PUT    /                     troca de senha por email
    DELETE /{id}                 remoção de conta (encerra a sessão local)
    POST   /send-recovery-code   envio de código de recuperação
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from api.connectors.backend.http_base import RequestExecutor
from api.connectors.backend.ids import generate_record_id
from api.connectors.backend.outcomes import (
    SERVER_ERROR_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    RequestOutcome,
    Success,
)
from api.connectors.backend.status_tables import StatusTable, fail, payload, succeed

logger = logging.getLogger(__name__)

PostDeleteHook = Callable[[], Awaitable[None]]

LIST_ALL_TABLE = StatusTable(
    rules={
        200: payload(default=[]),
        500: fail(SERVER_ERROR_MESSAGE),
    },
    default=fail(UNEXPECTED_ERROR_MESSAGE),
    error_prefix="An error occurred!",
)

LOGIN_TABLE = StatusTable(
    rules={
        200: payload(
            if_empty="An error occurred while trying to log in!\nPlease try again later."
        ),
        400: fail("Please fill in both fields."),
        401: fail("User not found!\nOne or both of the fields are incorrect."),
        404: fail("User not found!\nOne or both of the fields are incorrect."),
        500: fail(SERVER_ERROR_MESSAGE),
    },
    default=fail(UNEXPECTED_ERROR_MESSAGE),
    error_prefix="An error occurred!",
)

CREATE_TABLE = StatusTable(
    rules={
        200: payload(),
        400: fail("Please fill all fields."),
        500: fail(SERVER_ERROR_MESSAGE),
    },
    default=fail(UNEXPECTED_ERROR_MESSAGE),
)

UPDATE_TABLE = StatusTable(
    rules={
        200: payload(
            if_empty="An error occurred while trying to fetch user!\nPlease try again later."
        ),
        400: fail(
            "Please fill at least one of the fields to update your account information."
        ),
        404: fail("User not found!\nOne or both of the credentials are incorrect."),
        500: fail(SERVER_ERROR_MESSAGE),
    },
    default=fail(SERVER_ERROR_MESSAGE),
)

UPDATE_PASSWORD_TABLE = StatusTable(
    rules={200: succeed(True)},
    default=fail(UNEXPECTED_ERROR_MESSAGE),
)

DELETE_TABLE = StatusTable(
    rules={
        200: succeed(True),
        400: fail(SERVER_ERROR_MESSAGE),
        500: fail(SERVER_ERROR_MESSAGE),
    },
    default=fail(UNEXPECTED_ERROR_MESSAGE),
)

RECOVERY_TABLE = StatusTable(
    rules={200: succeed(True)},
    default=fail("No account matched with this email address!\nPlease try again"),
    error_prefix="Internal server error!\nAn error occurred while sending the email.",
)


def build_update_body(
    *,
    username: str | None = None,
    firstname: str | None = None,
    lastname: str | None = None,
    age: int | None = None,
    gender: str | None = None,
    email: str | None = None,
    phone: str | None = None,
    password: str | None = None,
    image_base64: str | None = None,
) -> dict[str, Any]:
    """Monta corpo de atualização: campos ausentes vão como "" e idade inválida como 0."""
    valid_age = isinstance(age, int) and not isinstance(age, bool) and age > 0
    return {
        "username": username or "",
        "firstname": firstname or "",
        "lastname": lastname or "",
        "age": age if valid_age else 0,
        "gender": gender or "",
        "email": email or "",
        "phone": phone or "",
        "password": password or "",
        "imageBase64": image_base64 or "",
    }


class UserClient:
    """Operações do recurso User sobre um RequestExecutor.

    Args:
        executor: Executor apontando para USER_API_URL
        on_account_removed: Hook executado após remoção bem-sucedida
            (composition root injeta o sign-out da sessão local)
    """

    def __init__(
        self,
        executor: RequestExecutor,
        on_account_removed: PostDeleteHook | None = None,
    ) -> None:
        self._executor = executor
        self._on_account_removed = on_account_removed

    async def fetch_all_users(self) -> RequestOutcome:
        return await self._executor.execute("GET", "/all", table=LIST_ALL_TABLE)

    async def login(self, email: str, password: str) -> RequestOutcome:
        """Autentica por email e senha; Success carrega o registro do usuário."""
        return await self._executor.execute(
            "POST",
            "/login",
            {"email": email, "password": password},
            table=LOGIN_TABLE,
        )

    async def create_user(
        self,
        *,
        username: str,
        firstname: str,
        lastname: str,
        age: int,
        gender: str,
        email: str,
        phone: str,
        password: str,
        is_coach: bool = False,
        image_base64: str | None = None,
    ) -> RequestOutcome:
        """Cria usuário com id gerado localmente (chave primária no backend)."""
        body = {
            "id": generate_record_id(),
            "username": username,
            "firstname": firstname,
            "lastname": lastname,
            "age": age,
            "gender": gender,
            "email": email,
            "phone": phone,
            "password": password,
            "isCoach": is_coach,
            "imageBase64": image_base64,
        }
        return await self._executor.execute("POST", "", body, table=CREATE_TABLE)

    async def update_user(self, user_id: str, **fields: Any) -> RequestOutcome:
        """Atualiza perfil. Aceita os campos de `build_update_body`."""
        return await self._executor.execute(
            "PUT", f"/{user_id}", build_update_body(**fields), table=UPDATE_TABLE
        )

    async def update_password_by_email(self, email: str, password: str) -> RequestOutcome:
        return await self._executor.execute(
            "PUT",
            "",
            {"email": email, "password": password},
            table=UPDATE_PASSWORD_TABLE,
        )

    async def remove_user(self, user_id: str) -> RequestOutcome:
        """Remove a conta; em caso de sucesso dispara o hook pós-remoção.

        A conta já foi apagada no backend quando o hook roda, então uma
        falha no hook é registrada mas não altera o outcome.
        """
        outcome = await self._executor.execute(
            "DELETE", f"/{user_id}", table=DELETE_TABLE
        )
        if isinstance(outcome, Success) and self._on_account_removed is not None:
            try:
                await self._on_account_removed()
            except Exception as exc:
                logger.error(
                    "post_delete_hook_failed",
                    extra={"error_type": type(exc).__name__},
                )
        return outcome

    async def send_recovery_code(self, email: str, recovery_code: str) -> RequestOutcome:
        return await self._executor.execute(
            "POST",
            "/send-recovery-code",
            {"email": email, "recoveryCode": recovery_code},
            table=RECOVERY_TABLE,
        )
