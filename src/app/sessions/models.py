"""Modelo de sessão local do usuário.

Sessão = identidade do usuário autenticado + preferências. Criada no
login/cadastro, lida em todo startup, destruída no logout ou remoção
da conta.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

Preferences = dict[str, str]

DEFAULT_PREFERENCES: Preferences = {"language": "English", "theme": "dark"}

IMAGE_URI_PREFIX = "data:image/jpeg;base64,"


def default_preferences() -> Preferences:
    """Cópia das preferências padrão (nunca compartilhar o dict global)."""
    return dict(DEFAULT_PREFERENCES)


def image_uri_from_base64(image_base64: str) -> str:
    """Converte imagem base64 do backend em referência exibível."""
    return f"{IMAGE_URI_PREFIX}{image_base64}"


@dataclass(frozen=True, slots=True)
class UserIdentity:
    """Identidade do usuário autenticado.

    O backend define o formato do registro; aqui só `id` é interpretado
    (endereçamento de updates e remoção). Senhas nunca são mantidas.

    Atributos:
        id: Identificador opaco (gerado no cliente no cadastro)
        username / firstname / lastname: Nome de exibição
        email / phone: Contato
        is_coach: Papel do usuário
        image: Referência da foto (data URI) ou None
        age / gender: Campos de perfil
    """

    id: str
    username: str = ""
    firstname: str = ""
    lastname: str = ""
    email: str = ""
    phone: str = ""
    is_coach: bool = False
    image: str | None = None
    age: int = 0
    gender: str = ""

    @property
    def display_name(self) -> str:
        full = f"{self.firstname} {self.lastname}".strip()
        return full or self.username

    def to_dict(self) -> dict[str, Any]:
        """Serializa no formato de chaves do backend."""
        return {
            "id": self.id,
            "username": self.username,
            "firstname": self.firstname,
            "lastname": self.lastname,
            "email": self.email,
            "phone": self.phone,
            "isCoach": self.is_coach,
            "image": self.image,
            "age": self.age,
            "gender": self.gender,
        }

    @classmethod
    def from_record(cls, data: dict[str, Any]) -> UserIdentity:
        """Constrói a partir do registro do backend ou do store local.

        `imageBase64` (backend) vira data URI; `image` pode vir como
        string ou como {"uri": ...} (formato legado do store).
        """
        image = data.get("image")
        if isinstance(image, dict):
            image = image.get("uri")
        if data.get("imageBase64"):
            image = image_uri_from_base64(data["imageBase64"])
        age = data.get("age")
        return cls(
            id=str(data["id"]),
            username=data.get("username") or "",
            firstname=data.get("firstname") or "",
            lastname=data.get("lastname") or "",
            email=data.get("email") or "",
            phone=data.get("phone") or "",
            is_coach=bool(data.get("isCoach", False)),
            image=image or None,
            age=age if isinstance(age, int) and not isinstance(age, bool) else 0,
            gender=data.get("gender") or "",
        )


@dataclass(slots=True)
class Session:
    """Sessão local: identidade + preferências.

    Invariante: depois de carregada pelo store, `preferences` nunca é
    vazio (padrões aplicados quando o store não tinha nada).
    """

    identity: UserIdentity
    preferences: Preferences = field(default_factory=default_preferences)

    @property
    def user_id(self) -> str:
        return self.identity.id

    def to_dict(self) -> dict[str, Any]:
        """Serializa para persistência (preferências ficam em chave própria)."""
        return self.identity.to_dict()

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        preferences: Preferences | None = None,
    ) -> Session:
        return cls(
            identity=UserIdentity.from_record(data),
            preferences=dict(preferences) if preferences else default_preferences(),
        )
