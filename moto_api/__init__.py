"""API REST para gerenciar Motos, Manutenções e Usuários."""
