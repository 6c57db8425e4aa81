"""Coordinators — fluxos end-to-end que orquestram colaboradores injetados."""
