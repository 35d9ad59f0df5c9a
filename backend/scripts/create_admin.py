#!/usr/bin/env python3
"""
Create an admin account, or promote an existing farmer to admin.

    python scripts/create_admin.py --email admin@agroflow.com.br --password secret \
        --name "Admin" --phone 65999990000 --cpf 52998224725
"""

import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.orm import Session

from agroflow.core.database import SessionLocal
from agroflow.core.security import hash_password
from agroflow.models import ROLE_ADMIN, Farmer
from agroflow.repositories import farmers as farmers_repo
from agroflow.utils.documents import is_valid_cpf, only_digits


def ensure_admin_account(db: Session, email, password, producer_name, phone, cpf=None) -> Farmer:
    """Promote the farmer with this e-mail, or create a new admin. Commits."""
    farmer = farmers_repo.find_by_email(db, email)
    if farmer:
        farmer.role = ROLE_ADMIN
        if password:
            farmer.password = hash_password(password)
    else:
        cpf = only_digits(cpf)
        if not cpf or not is_valid_cpf(cpf):
            raise ValueError("A valid CPF is required to create a new admin")
        farmer = farmers_repo.add(
            db,
            farmers_repo.build(
                email=email,
                password=hash_password(password),
                producer_name=producer_name,
                phone=phone,
                cpf=cpf,
                role=ROLE_ADMIN,
            ),
        )
    db.commit()
    db.refresh(farmer)
    return farmer


def main():
    parser = argparse.ArgumentParser(description="Create or promote an AgroFlow admin account")
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", required=True)
    parser.add_argument("--name", default="Administrator", help="Producer name for a new account")
    parser.add_argument("--phone", default="0000000000")
    parser.add_argument("--cpf", help="Required when the account does not exist yet")
    args = parser.parse_args()

    db = SessionLocal()
    try:
        farmer = ensure_admin_account(db, args.email, args.password, args.name, args.phone, args.cpf)
        print(f"Admin ready: {farmer.email} (ID: {farmer.id})")
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()
