from sqlalchemy import Column, Integer, String
from employee_directory.core.database import Base


class Employee(Base):
    __tablename__ = "employees"
    # SQLite would otherwise hand out the id of a deleted last row again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    position = Column(String(50), nullable=False)
    phone = Column(String(10), nullable=True)
    department = Column(String(50), nullable=True)

    def __repr__(self):
        return f"<Employee id={self.id} email={self.email!r}>"
