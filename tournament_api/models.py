from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


class Account(db.Model):
    __tablename__ = 'usuarios'

    id = db.Column(db.Integer, primary_key=True)
    nombre = db.Column(db.String(100), nullable=False)
    apellido = db.Column(db.String(100), nullable=False)
    club = db.Column(db.String(100), nullable=False)
    telefono = db.Column(db.String(30), nullable=False)
    correo = db.Column(db.String(150), nullable=False)
    usuario = db.Column(db.String(100), nullable=False, index=True)
    # Only the one-way hash is ever stored here
    contrasena = db.Column('contraseña', db.String(256), nullable=False)
    rol = db.Column(db.String(50), nullable=False)

    # One login name may hold several accounts, one per role
    __table_args__ = (
        db.UniqueConstraint('usuario', 'rol', name='unique_usuario_per_rol'),
    )


class Tournament(db.Model):
    __tablename__ = 'torneos'

    id = db.Column(db.Integer, primary_key=True)
    nombre = db.Column(db.String(200), nullable=False)
    club = db.Column(db.String(100), nullable=False)
    participantes = db.Column(db.Integer, nullable=False)
    pistas = db.Column(db.Integer, nullable=False)
    grupos = db.Column(db.Integer, nullable=False)
    fecha = db.Column(db.Date, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'nombre': self.nombre,
            'club': self.club,
            'participantes': self.participantes,
            'pistas': self.pistas,
            'grupos': self.grupos,
            'fecha': self.fecha.isoformat() if self.fecha else None,
        }


class Participant(db.Model):
    __tablename__ = 'participantes'

    id = db.Column(db.Integer, primary_key=True)
    torneo_id = db.Column('torneoId', db.Integer, db.ForeignKey('torneos.id'), nullable=False, index=True)
    nombre = db.Column(db.String(100), nullable=False)
    apellido = db.Column(db.String(100), nullable=False)
    telefono = db.Column(db.String(30), nullable=False)
    correo = db.Column(db.String(150), nullable=False)
    club = db.Column(db.String(100), nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'torneoId': self.torneo_id,
            'nombre': self.nombre,
            'apellido': self.apellido,
            'telefono': self.telefono,
            'correo': self.correo,
            'club': self.club,
        }
