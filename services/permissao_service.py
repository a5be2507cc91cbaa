from repositories.usuario_repo import UsuarioRepo


CARGO_ADMINISTRADOR = "Funcionario Cpalm"


class PermissaoService:
    @classmethod
    def tem_permissao(cls, usuario_id: str, rota, metodo: str) -> bool:
        """Confere a flag do método (buscar, enviar, ...) na rota cadastrada."""
        usuario = UsuarioRepo.obter_por_id(usuario_id)
        if usuario is None or not usuario.status:
            return False
        if usuario.cargo == CARGO_ADMINISTRADOR:
            return True
        return bool(getattr(rota, metodo, False))
