"""Bledy zglaszane przez bramki autentykacji."""


class AuthError(Exception):
    """Bazowy blad autentykacji."""


class CredentialError(AuthError):
    """Nieprawidlowy login lub haslo (albo konto nieaktywne)."""


class GatewayUnavailable(AuthError):
    """Backend autentykacji niedostepny - blad sieci lub serwera."""
