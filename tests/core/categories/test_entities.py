"""
Testes Unitários para o agregado Category.

Testa todas as regras de negócio encapsuladas na entidade,
incluindo validações, ativação/desativação e atualização.

Coverage:
- Category(): Validações de criação e defaults
- Category.activate() / deactivate()
- Category.update()
- Category.restore(): Reconstrução a partir da persistência
- Atomicidade: mutação inválida não altera estado
"""

import pytest
from datetime import datetime, timezone

from src.core.categories.entities import Category
from src.core.shared.exceptions import EntityValidationError


@pytest.fixture
def valid_category():
    """Fixture para categoria válida."""
    return Category("Category Name", "Some description")


def snapshot(category):
    return (
        category.id,
        category.name,
        category.description,
        category.is_active,
        category.created_at,
    )


class TestCategoryCriacao:
    """Testes para criação de categorias."""

    def test_criar_categoria_valida(self):
        """Deve criar categoria com dados válidos."""
        before = datetime.now(timezone.utc)

        category = Category("Action", "Action movies", is_active=True)

        after = datetime.now(timezone.utc)
        assert category.id
        assert len(category.id) == 36  # UUID
        assert category.name == "Action"
        assert category.description == "Action movies"
        assert category.is_active is True
        assert before <= category.created_at <= after

    @pytest.mark.parametrize("is_active", [True, False])
    def test_criar_categoria_com_is_active(self, is_active):
        category = Category("Action", "Action movies", is_active=is_active)

        assert category.is_active is is_active

    def test_criar_categoria_com_valores_default(self):
        """Descrição default é "" e is_active default é True."""
        category = Category("Action")

        assert category.description == ""
        assert category.is_active is True

    def test_ids_unicos(self):
        """Cada categoria recebe um identificador próprio."""
        first = Category("Action")
        second = Category("Action")

        assert first.id != second.id
        assert first != second

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_nome_vazio_ou_nulo_erro(self, name):
        """Deve rejeitar nome nulo, vazio ou só com espaços."""
        with pytest.raises(EntityValidationError) as exc_info:
            Category(name, "Some description")

        assert str(exc_info.value) == "Name should not be empty or null"
        assert exc_info.value.field == "Name"

    @pytest.mark.parametrize("name", ["a", "Ac", "1 "])
    def test_nome_muito_curto_erro(self, name):
        """Deve rejeitar nome com menos de 3 caracteres."""
        with pytest.raises(EntityValidationError) as exc_info:
            Category(name, "Some description")

        assert str(exc_info.value) == "Name should be at least 3 characters long"

    def test_nome_muito_longo_erro(self):
        """Deve rejeitar nome com mais de 255 caracteres."""
        with pytest.raises(EntityValidationError) as exc_info:
            Category("a" * 256, "Some description")

        assert str(exc_info.value) == "Name should be less or equal 255 characters long"

    @pytest.mark.parametrize("name", ["abc", "a" * 255])
    def test_nome_nos_limites_ok(self, name):
        category = Category(name)

        assert category.name == name

    def test_descricao_nula_erro(self):
        """Deve rejeitar descrição None."""
        with pytest.raises(EntityValidationError) as exc_info:
            Category("Action", None)

        assert str(exc_info.value) == "Description should not be null"
        assert exc_info.value.field == "Description"

    def test_descricao_muito_longa_erro(self):
        """Deve rejeitar descrição com mais de 10.000 caracteres."""
        with pytest.raises(EntityValidationError) as exc_info:
            Category("Action", "a" * 10_001)

        assert str(exc_info.value) == (
            "Description should be less or equal 10000 characters long"
        )

    def test_descricao_no_limite_ok(self):
        category = Category("Action", "a" * 10_000)

        assert len(category.description) == 10_000

    def test_nome_validado_antes_da_descricao(self):
        """Com nome e descrição inválidos, o erro do nome é reportado."""
        with pytest.raises(EntityValidationError) as exc_info:
            Category("Ac", None)

        assert str(exc_info.value) == "Name should be at least 3 characters long"


class TestCategoryAtivacao:
    """Testes para activate/deactivate."""

    @pytest.mark.parametrize("is_active", [True, False])
    def test_activate(self, is_active):
        """Deve ativar mantendo os demais campos."""
        category = Category("Action", "Action movies", is_active=is_active)
        before = snapshot(category)

        category.activate()

        assert category.is_active is True
        assert snapshot(category)[:3] == before[:3]
        assert category.created_at == before[4]

    @pytest.mark.parametrize("is_active", [True, False])
    def test_deactivate(self, is_active):
        """Deve desativar mantendo os demais campos."""
        category = Category("Action", "Action movies", is_active=is_active)
        before = snapshot(category)

        category.deactivate()

        assert category.is_active is False
        assert snapshot(category)[:3] == before[:3]
        assert category.created_at == before[4]


class TestCategoryUpdate:
    """Testes para update."""

    def test_update_somente_nome(self, valid_category):
        """Deve alterar nome e manter descrição."""
        old_description = valid_category.description

        valid_category.update("New Name")

        assert valid_category.name == "New Name"
        assert valid_category.description == old_description

    def test_update_nome_e_descricao(self, valid_category):
        valid_category.update("New Name", "New Desc")

        assert valid_category.name == "New Name"
        assert valid_category.description == "New Desc"

    def test_update_descricao_vazia(self, valid_category):
        """String vazia é uma descrição válida (não é None)."""
        valid_category.update("New Name", "")

        assert valid_category.description == ""

    def test_update_nao_altera_is_active(self, valid_category):
        valid_category.deactivate()

        valid_category.update("New Name", "New Desc")

        assert valid_category.is_active is False

    def test_update_preserva_id_e_created_at(self, valid_category):
        before = snapshot(valid_category)

        valid_category.update("New Name")

        assert valid_category.id == before[0]
        assert valid_category.created_at == before[4]

    @pytest.mark.parametrize("name,description,message", [
        ("", None, "Name should not be empty or null"),
        ("Ac", None, "Name should be at least 3 characters long"),
        ("a" * 256, None, "Name should be less or equal 255 characters long"),
        ("New Name", "a" * 10_001,
         "Description should be less or equal 10000 characters long"),
    ])
    def test_update_invalido_nao_altera_estado(
        self, valid_category, name, description, message
    ):
        """Mutação inválida falha sem aplicar nada."""
        before = snapshot(valid_category)

        with pytest.raises(EntityValidationError) as exc_info:
            valid_category.update(name, description)

        assert str(exc_info.value) == message
        assert snapshot(valid_category) == before


class TestCategoryRestore:
    """Testes para reconstrução a partir da persistência."""

    def test_restore_preserva_identidade(self):
        created_at = datetime(2024, 1, 10, 12, 30, tzinfo=timezone.utc)

        category = Category.restore(
            id="6f1c2e8a-1b7d-4a36-9a57-0c6d7f5e2b11",
            name="Action",
            description="Action movies",
            is_active=False,
            created_at=created_at,
        )

        assert category.id == "6f1c2e8a-1b7d-4a36-9a57-0c6d7f5e2b11"
        assert category.name == "Action"
        assert category.is_active is False
        assert category.created_at == created_at

    def test_restore_valida_dados(self):
        with pytest.raises(EntityValidationError) as exc_info:
            Category.restore(
                id="6f1c2e8a-1b7d-4a36-9a57-0c6d7f5e2b11",
                name="Ac",
                description="",
                is_active=True,
                created_at=datetime.now(timezone.utc),
            )

        assert str(exc_info.value) == "Name should be at least 3 characters long"

    def test_restore_nunca_reatribui_id(self):
        """O id persistido é mantido mesmo quando vazio."""
        category = Category.restore(
            id="",
            name="Action",
            description="",
            is_active=True,
            created_at=datetime.now(timezone.utc),
        )

        assert category.id == ""

    def test_igualdade_por_id(self, valid_category):
        """Instâncias com mesmo id representam a mesma categoria."""
        restored = Category.restore(
            id=valid_category.id,
            name="Other Name",
            description="",
            is_active=False,
            created_at=valid_category.created_at,
        )

        assert restored == valid_category
        assert hash(restored) == hash(valid_category)
