# -*- coding: utf-8 -*-

DEFAULT_LANGUAGE = 'en'

MESSAGES = {
    'en': {
        # --- add ---
        'skipped_missing': "Skipping '{path}': no such file or directory",
        'skipped_relative': "Skipping '{path}': refusing to trash '.' or '..'",
        'skipped_inside_trash': "Skipping '{path}': it is part of the trash itself",
        'trashed_item': "[{count}] {path}",
        'added_total': "{count} item(s) moved to the trash",
        # --- list ---
        'list_total': "{count} item(s) in the trash",
        # --- dump ---
        'dump_confirm': "Permanently delete {count} item(s)?",
        'dumped_item': "Deleted {path}",
        'dumped_total': "{count} item(s) permanently deleted",
        # --- restore ---
        'restore_prompt': "Restore",
        'restored_item': "Restored {ordinal}: {path}",
        'restored_total': "Restored item(s): {ordinals}",
        'nothing_restored': "Nothing was restored",
        'continue_prompt': "Continue anyway?",
        'restore_help': (
            "Select the items to restore:\n"
            "  3           a single item\n"
            "  ,0 4 7      a list of items\n"
            "  -2 5        an inclusive range (first < last)\n"
            "  /.*\\.txt    every item whose original path fully matches a regex"
        ),
        # --- size ---
        'computing_size': "Computing trash size",
        'size_report': "{size} used by {count} item(s)",
        # --- check ---
        'check_clean': "The trash is consistent",
        'check_orphan': "File without record: {path}",
        'check_dangling': "Record without file: {path}",
        'check_staged': "Unfinished record: {path}",
        'check_fixed': "Quarantined {orphans} file(s), recovered {recovered} record(s), removed {records} broken record(s)",
        'check_issues': "{count} problem(s) found, run 'trash check --fix' to repair them",
        # --- errors ---
        'error': "Error",
        'layout_error': "Could not create trash directory '{path}': {reason}",
        'relocation_error': "Could not move '{source}' to '{target}': {reason}",
        'info_write_error': "Could not write trash record '{path}': {reason}",
        'info_read_error': "Could not read trash record '{path}': {reason}",
        'refusing_to_overwrite': "Refusing to overwrite '{path}'",
        'deletion_error': "Could not delete '{path}': {reason}",
        'no_trash_to': "No trash to {verb}",
        'verb_list': "list",
        'verb_dump': "dump",
        'verb_restore': "restore",
        'verb_size': "size",
        'invalid_expression': "Invalid expression: '{expression}'",
        'invalid_pattern': "Invalid pattern '{pattern}': {reason}",
        'malformed_range': "Malformed range '{expression}': {reason}",
        'range_needs_two': "expected exactly two numbers",
        'range_not_numeric': "both ends must be numbers",
        'range_order': "the first number must be lower than the second",
        'range_bounds': "{end} is past the last item ({last})",
        'ordinal_out_of_range': "Item {ordinal} does not exist",
        'operation_cancelled': "Operation cancelled",
    },
    'es': {
        'skipped_missing': "Omitiendo '{path}': no existe el archivo o directorio",
        'skipped_relative': "Omitiendo '{path}': no se puede enviar '.' o '..' a la papelera",
        'skipped_inside_trash': "Omitiendo '{path}': forma parte de la papelera",
        'trashed_item': "[{count}] {path}",
        'added_total': "{count} elemento(s) enviados a la papelera",
        'list_total': "{count} elemento(s) en la papelera",
        'dump_confirm': "¿Eliminar permanentemente {count} elemento(s)?",
        'dumped_item': "Eliminado {path}",
        'dumped_total': "{count} elemento(s) eliminados permanentemente",
        'restore_prompt': "Restaurar",
        'restored_item': "Restaurado {ordinal}: {path}",
        'restored_total': "Elemento(s) restaurados: {ordinals}",
        'nothing_restored': "No se restauró nada",
        'continue_prompt': "¿Continuar de todos modos?",
        'restore_help': (
            "Seleccione los elementos a restaurar:\n"
            "  3           un solo elemento\n"
            "  ,0 4 7      una lista de elementos\n"
            "  -2 5        un rango inclusivo (primero < último)\n"
            "  /.*\\.txt    cada elemento cuya ruta original coincida por completo"
        ),
        'computing_size': "Calculando el tamaño de la papelera",
        'size_report': "{size} usados por {count} elemento(s)",
        'check_clean': "La papelera es consistente",
        'check_orphan': "Archivo sin registro: {path}",
        'check_dangling': "Registro sin archivo: {path}",
        'check_staged': "Registro incompleto: {path}",
        'check_fixed': "{orphans} archivo(s) en cuarentena, {recovered} registro(s) recuperados, {records} registro(s) dañados eliminados",
        'check_issues': "{count} problema(s) encontrados, ejecute 'trash check --fix' para repararlos",
        'error': "Error",
        'layout_error': "No se pudo crear el directorio '{path}': {reason}",
        'relocation_error': "No se pudo mover '{source}' a '{target}': {reason}",
        'info_write_error': "No se pudo escribir el registro '{path}': {reason}",
        'info_read_error': "No se pudo leer el registro '{path}': {reason}",
        'refusing_to_overwrite': "No se sobrescribirá '{path}'",
        'deletion_error': "No se pudo eliminar '{path}': {reason}",
        'no_trash_to': "No hay nada en la papelera para {verb}",
        'verb_list': "listar",
        'verb_dump': "vaciar",
        'verb_restore': "restaurar",
        'verb_size': "medir",
        'invalid_expression': "Expresión no válida: '{expression}'",
        'invalid_pattern': "Patrón no válido '{pattern}': {reason}",
        'malformed_range': "Rango mal formado '{expression}': {reason}",
        'range_needs_two': "se esperaban exactamente dos números",
        'range_not_numeric': "ambos extremos deben ser números",
        'range_order': "el primer número debe ser menor que el segundo",
        'range_bounds': "{end} está después del último elemento ({last})",
        'ordinal_out_of_range': "El elemento {ordinal} no existe",
        'operation_cancelled': "Operación cancelada",
    },
}

_current_language = DEFAULT_LANGUAGE

def set_language(language):
    """Cambia el idioma de la interfaz; los idiomas desconocidos usan el inglés."""
    global _current_language
    _current_language = language if language in MESSAGES else DEFAULT_LANGUAGE

def t(key, **kwargs):
    """Traduce una clave al idioma actual, con inglés como respaldo."""
    text = MESSAGES[_current_language].get(key) or MESSAGES[DEFAULT_LANGUAGE].get(key, key)
    return text.format(**kwargs) if kwargs else text
