# utils/translations.py
from typing import Dict, List

DEFAULT_LANG: str = "en"
VALID_LANGS: List[str] = ["en", "es"]

LANG_DISPLAY: Dict[str, str] = {
    "en": "English (EN)",
    "es": "Español (ES)",
}

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    # ==================================================
    # English (default)
    # ==================================================
    "en": {
        # --- Shell ---
        "app.brand": "Qvent",
        "app.loading": "Loading event...",
        "app.go_back": "Go Back",
        "app.maintenance_title": "We'll be right back",
        "app.maintenance_body": "Registrations are paused for maintenance. Please come back soon.",

        # --- Event details ---
        "event.closed_title": "Event Closed",
        "event.closed_or_expired": "This event is closed or expired",
        "event.load_failed": "Something went wrong",
        "event.free_badge": "🎁 FREE",
        "event.starts_in": "EVENT STARTS IN",
        "event.expired_badge": "Event Expired",
        "event.about": "About",
        "event.contact": "Contact",
        "event.location": "Location",
        "event.view_maps": "View Maps →",
        "countdown.days": "Days",
        "countdown.hours": "Hours",
        "countdown.mins": "Mins",
        "countdown.secs": "Secs",

        # --- Registration form ---
        "form.title": "Register Now",
        "form.required": "{label} is required",
        "form.select_placeholder": "Select {label}",
        "form.submit": "Register",
        "form.submitting": "Submitting...",
        "form.secure_note": "✓ Your information is secure",
        "form.success_title": "Submission Successful!",
        "form.success_body": "Thank you for registering. Redirecting...",

        # --- Submission errors ---
        "submit.already_submitted": "You have already submitted this form",
        "submit.closed": "This event is closed",
        "submit.failed": "Submission failed",

        # --- Payment ---
        "payment.title": "Complete Payment",
        "payment.subtitle": "Secure payment gateway",
        "payment.amount_due": "Amount Due",
        "payment.method": "Select Payment Method",
        "payment.card": "💳 Credit/Debit Card · Visa, Mastercard, Amex",
        "payment.upi": "📱 UPI/Wallet · Google Pay, PayTM, etc.",
        "payment.netbanking": "🏦 Net Banking · All major banks",
        "payment.processing": "Processing your payment... Please do not refresh this page",
        "payment.cancel": "Cancel",
        "payment.pay_now": "✓ Pay Now",
        "payment.secure_note": "🔒 Your payment information is secure",
        "payment.declined": "Your payment could not be completed",

        # --- Result pages ---
        "success.title": "You're in! 🎉",
        "success.body": "Your registration has been received. We've saved your spot.",
        "expired.title": "Event Expired",
        "expired.body": "Registrations for this event are no longer open.",
        "notfound.title": "404 · Event not found",
        "notfound.body": "We couldn't find the event you're looking for. Check the link you received.",
    },

    # ==================================================
    # Español
    # ==================================================
    "es": {
        "app.brand": "Qvent",
        "app.loading": "Cargando evento...",
        "app.go_back": "Volver",
        "app.maintenance_title": "Volvemos enseguida",
        "app.maintenance_body": "Las inscripciones están en pausa por mantenimiento. Vuelve pronto.",

        "event.closed_title": "Evento cerrado",
        "event.closed_or_expired": "Este evento está cerrado o ha caducado",
        "event.load_failed": "Algo salió mal",
        "event.free_badge": "🎁 GRATIS",
        "event.starts_in": "EL EVENTO EMPIEZA EN",
        "event.expired_badge": "Evento caducado",
        "event.about": "Acerca de",
        "event.contact": "Contacto",
        "event.location": "Ubicación",
        "event.view_maps": "Ver mapa →",
        "countdown.days": "Días",
        "countdown.hours": "Horas",
        "countdown.mins": "Min",
        "countdown.secs": "Seg",

        "form.title": "Inscríbete",
        "form.required": "{label} es obligatorio",
        "form.select_placeholder": "Selecciona {label}",
        "form.submit": "Inscribirme",
        "form.submitting": "Enviando...",
        "form.secure_note": "✓ Tu información está segura",
        "form.success_title": "¡Inscripción enviada!",
        "form.success_body": "Gracias por inscribirte. Redirigiendo...",

        "submit.already_submitted": "Ya enviaste este formulario",
        "submit.closed": "Este evento está cerrado",
        "submit.failed": "No se pudo enviar la inscripción",

        "payment.title": "Completar pago",
        "payment.subtitle": "Pasarela de pago segura",
        "payment.amount_due": "Importe a pagar",
        "payment.method": "Elige un método de pago",
        "payment.card": "💳 Tarjeta de crédito/débito · Visa, Mastercard, Amex",
        "payment.upi": "📱 UPI/Monedero · Google Pay, PayTM, etc.",
        "payment.netbanking": "🏦 Banca en línea · Todos los bancos",
        "payment.processing": "Procesando tu pago... No recargues esta página",
        "payment.cancel": "Cancelar",
        "payment.pay_now": "✓ Pagar ahora",
        "payment.secure_note": "🔒 Tus datos de pago están seguros",
        "payment.declined": "No se pudo completar el pago",

        "success.title": "¡Estás dentro! 🎉",
        "success.body": "Hemos recibido tu inscripción. Tu plaza está reservada.",
        "expired.title": "Evento caducado",
        "expired.body": "Las inscripciones para este evento ya no están abiertas.",
        "notfound.title": "404 · Evento no encontrado",
        "notfound.body": "No encontramos el evento que buscas. Revisa el enlace que recibiste.",
    },
}

def normalize_lang(lang: str | None) -> str:
    code = (lang or "").lower().strip()
    return code if code in VALID_LANGS else DEFAULT_LANG

def t(key: str, lang: str | None = None) -> str:
    code = normalize_lang(lang or DEFAULT_LANG)
    bundle = TRANSLATIONS.get(code, TRANSLATIONS[DEFAULT_LANG])
    return bundle.get(key, TRANSLATIONS[DEFAULT_LANG].get(key, key))
