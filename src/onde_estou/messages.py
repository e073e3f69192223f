# messages.py
# 画面に出す文言（pt-BR）

APP_TITLE = "Onde Estou?"

LOCATING = "Obtendo sua localização..."
UNLOCATED = "Localização indisponível"

PERMISSION_DENIED_TITLE = "Permissão negada"
PERMISSION_DENIED_MESSAGE = "Permissão de localização é necessária para usar o app"

ERROR_TITLE = "Erro"
LOCATION_ERROR_MESSAGE = "Não foi possível obter sua localização"
EMPTY_TITLE_MESSAGE = "Por favor, insira um título para o marcador"

RECENTER_TITLE = "Localização"
RECENTER_UNAVAILABLE_MESSAGE = "Sua localização ainda não está disponível"

ADD_FORM_HEADING = "Adicionar Marcador"
TITLE_PLACEHOLDER = "Título do marcador"
DESCRIPTION_PLACEHOLDER = "Descrição (opcional)"
ADD_BUTTON = "Adicionar"
CANCEL_BUTTON = "Cancelar"

LIST_HEADING = "Meus Marcadores"
LIST_EMPTY = "Nenhum marcador adicionado"
LIST_EMPTY_HINT = "Toque no mapa para adicionar um marcador"
LIST_BUTTON = "Lista"
CLOSE_BUTTON = "Fechar"
RECENTER_BUTTON = "Centralizar"

REMOVE_TITLE = "Remover Marcador"
REMOVE_MESSAGE = "Tem certeza que deseja remover este marcador?"
REMOVE_BUTTON = "Remover"
OK_BUTTON = "OK"
