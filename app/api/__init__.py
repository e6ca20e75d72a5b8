"""HTTP routes mounted under /api."""

from fastapi import APIRouter

from app.api import auth, payments, students

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(students.router, prefix="/admin/students", tags=["students"])
router.include_router(payments.router, tags=["payments"])
