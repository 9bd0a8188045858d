"""Skrypt do tworzenia administratorow panelu.

Uzycie:
    python scripts/create_admin.py <username> <password> [name]
    python scripts/create_admin.py --list

Przyklad:
    python scripts/create_admin.py admin tajnehaslo123 "Jan Kowalski"
"""

import sys
from pathlib import Path

# Dodaj katalog projektu do sciezki
sys.path.insert(0, str(Path(__file__).parent.parent))

from smashfun.database import SessionLocal, init_db
from smashfun.services.auth import AuthService
from smashfun.models import User, UserRole


def create_admin(username: str, password: str, name: str = ""):
    """Utworz nowego administratora."""
    init_db()
    db = SessionLocal()

    try:
        auth = AuthService(db)

        # Sprawdz czy uzytkownik juz istnieje
        if auth.get_user_by_username(username):
            print(f"Blad: Uzytkownik '{username}' juz istnieje!")
            sys.exit(1)

        user = auth.create_user(
            username=username,
            password=password,
            name=name or username,
            role=UserRole.ADMIN,
        )

        print(f"Sukces! Utworzono administratora: {user.username}")
        print(f"  ID: {user.id}")
        print(f"  Nazwa: {user.name}")
        print(f"\nMozesz teraz zalogowac sie na http://localhost:8000/login")

    finally:
        db.close()


def list_users():
    """Wyswietl liste kont."""
    init_db()
    db = SessionLocal()

    try:
        users = db.query(User).order_by(User.id).all()

        if not users:
            print("Brak kont w bazie danych.")
            print("Uzyj: python scripts/create_admin.py <username> <password>")
            return

        print("Lista kont:")
        print("-" * 50)
        for user in users:
            status = "aktywny" if user.is_active else "nieaktywny"
            last_login = user.last_login.strftime("%Y-%m-%d %H:%M") if user.last_login else "nigdy"
            print(f"  {user.id}. {user.username} ({user.role}) - {status}")
            print(f"     Ostatnie logowanie: {last_login}")
        print("-" * 50)
        print(f"Razem: {len(users)} kont")

    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) == 1:
        # Bez argumentow - pokaz liste
        list_users()
    elif len(sys.argv) == 2 and sys.argv[1] in ("--list", "-l"):
        list_users()
    elif len(sys.argv) in (3, 4):
        username = sys.argv[1]
        password = sys.argv[2]
        name = sys.argv[3] if len(sys.argv) == 4 else ""

        if len(password) < 6:
            print("Blad: Haslo musi miec co najmniej 6 znakow!")
            sys.exit(1)

        create_admin(username, password, name)
    else:
        print(__doc__)
        sys.exit(1)
