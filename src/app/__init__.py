"""App — orquestração do cliente: startup, sessão e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: fluxos end-to-end (sequenciamento do startup)
- infra/: implementações concretas de IO (stores, rede, shell headless)
- protocols/: contratos dos colaboradores externos
- sessions/: modelo e ciclo de vida da sessão local
- observability/: correlation_id por passada de bootstrap
- constants/: rotas das telas

Padrão: app executa; api adapta; fsm governa; utils apoia.
"""
