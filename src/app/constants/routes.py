"""Rotas das telas e conjuntos de prefetch."""

from __future__ import annotations

# Ponto de entrada: re-executa o bootstrap do zero
ENTRY = "/"

INTRODUCTION = "/screens/authentication/introduction"
LOGIN = "/screens/authentication/login"
REGISTER = "/screens/authentication/register"
RECOVERY = "/screens/authentication/recovery"

HOMEPAGE = "/screens/main/homepage"
COACHES = "/screens/main/coaches"
PROFILE = "/screens/main/profile"

# Telas preparadas quando não há sessão
AUTHENTICATION_SCREENS: tuple[str, ...] = (INTRODUCTION, LOGIN, REGISTER, RECOVERY)

# Telas preparadas quando há sessão
MAIN_SCREENS: tuple[str, ...] = (HOMEPAGE, COACHES, PROFILE)
