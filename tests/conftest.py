"""Shared fixtures for sprintdoc tests."""

import docx
import pytest


SAMPLE_PLAN = [
    "Plano de Projeto",
    "Sprint 1.1 Kickoff",
    "User Story: Login",
    "Como um usuário, quero entrar no sistema",
    "Critérios de Aceite",
    "Cenário 1: Login válido",
    "Dado que tenho uma conta",
    "Quando informo a senha correta",
    "Então vejo o painel",
    "Tarefa 1.1.1 Design da tela",
    "Wireframe aprovado",
    "Tarefa 1.1.2 Endpoint de login",
    "User Story: Logout",
    "Como um usuário, quero sair",
    "Sprint 1.2 Relatórios",
    "User Story: Exportar CSV",
    "Tarefa 1.2.1 Gerar arquivo",
]


@pytest.fixture
def make_docx(tmp_path):
    """Build a .docx with one paragraph per line."""

    def _make(lines, name="plan.docx"):
        document = docx.Document()
        for text in lines:
            document.add_paragraph(text)
        path = tmp_path / name
        document.save(str(path))
        return path

    return _make


@pytest.fixture
def sample_docx(make_docx):
    return make_docx(SAMPLE_PLAN)
