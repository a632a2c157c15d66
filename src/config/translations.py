from dataclasses import dataclass


@dataclass(frozen=True)
class Translation:
    """Text templates for one language. Templates use str.format fields."""

    # Command grammar
    days_divider: str = "on"
    time_divider: str = "at"
    weekday_names: tuple = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

    # Access
    access_at_least_admin: str = "Access Denied! You need to be at least admin in this slack to use this command!"
    access_at_least_pm: str = "Access Denied! You need to be at least PM in this project to use this command!"
    access_at_least_admin_or_owner: str = "Access Denied! You need to be at least admin in this slack or the owner of this report to use this command!"
    access_at_least_pm_or_owner: str = "Access Denied! You need to be at least PM in this project or the owner of this report to use this command!"
    channel_not_registered: str = "This channel is not registered yet! Please, invite the bot to the channel and try again."
    user_not_registered: str = "You are not registered in this workspace yet! Please, try again in a minute."

    # Roles
    need_correct_user_role: str = "Please, check correct role name (admin, developer, pm)"
    add_members_failed: str = "Could not assign members: {users}\n"
    add_members_exist: str = "Members already have roles: {users}\n"
    add_members_added: str = "Members are assigned: {users}\n"
    add_pms_failed: str = "Could not assign users as PMs: {users}\n"
    add_pms_exist: str = "Users already have roles: {users}\n"
    add_pms_added: str = "Users are assigned as PMs: {users}\n"
    add_admins_failed: str = "Could not assign users as admins: {users}\n"
    add_admins_exist: str = "Users were already assigned as admins: {users}\n"
    add_admins_added: str = "Users are assigned as admins: {users}\n"
    delete_members_failed: str = "Could not remove the following members: {users}\n"
    delete_members_deleted: str = "The following members were removed: {users}\n"
    delete_admins_failed: str = "Could not remove users as admins: {users}\n"
    delete_admins_deleted: str = "Users are removed as admins: {users}\n"
    admin_assigned: str = "Congratulations! You are assigned as an admin of this workspace."
    admin_removed: str = "You are no longer an admin of this workspace."
    list_standupers: str = "Standupers in this channel: {users}"
    list_no_standupers: str = "No standupers in this channel! To add one, please, use `/standup add` command"
    list_pms: str = "PMs in this channel: {users}"
    list_no_pms: str = "No PMs in this channel! To add one, please, use `/standup add @user / pm` command"
    list_admins: str = "Admins in this workspace: {users}"
    list_no_admins: str = "No admins in this workspace! To add one, please, use `/standup add @user / admin` command"

    # Validation
    wrong_username: str = "Seems like you misspelled username {value}. Please, check and try command again!\n"
    wrong_time_format: str = "Wrong time format {value}! Please, use 24-hour HH:MM format, e.g. 09:30"
    wrong_weekday: str = "Unknown weekday {value}! Please, use weekdays like mon, tue, wed, thu, fri, sat, sun"
    no_weekdays: str = "Please, name at least one weekday for the timetable!"
    wrong_timetable_command: str = "Wrong timetable command! Please, use format: @user1 @user2 on mon tue at 10:00"
    wrong_date: str = "Wrong date {value}! Please, use YYYY-MM-DD format"
    wrong_date_range: str = "Wrong date range! The start date {value} is after the end date"
    wrong_n_args: str = "Wrong number of arguments! Please, check the command and try again."

    # Timetables
    timetable_created: str = "Timetable for <@{user}> created: {timetable}\n"
    timetable_updated: str = "Timetable for <@{user}> updated: {timetable}\n"
    timetable_show: str = "Timetable for <@{user}> is: {timetable}\n"
    timetable_deleted: str = "Timetable removed for <@{user}>\n"
    can_not_update_timetable: str = "Could not update timetable for <@{user}>: {error}\n"
    can_not_delete_timetable: str = "Could not remove timetable for <@{user}>: {error}\n"
    not_a_standuper: str = "Seems like <@{user}> is not even assigned as standuper in this channel!\n"
    no_timetable_set: str = "<@{user}> does not have a timetable!\n"

    # Channel standup time
    add_standup_time: str = "<!date^{timestamp}^Standup time set at {{time}}|Standup time set at {time}>"
    add_standup_time_no_users: str = "<!date^{timestamp}^Standup time at {{time}} added, but there is no standup users for this channel|Standup time at {time} added, but there is no standup users for this channel>"
    show_standup_time: str = "<!date^{timestamp}^Standup time is {{time}}|Standup time is {time}>"
    show_no_standup_time: str = "No standup time set for this channel yet! Please, add a standup time using `/standup add_deadline` command!"
    remove_standup_time: str = "standup time for channel deleted"
    remove_standup_time_with_users: str = "standup time for this channel removed, but there are people marked as a standuper."

    # Reports
    wrong_project_name: str = "Wrong project name!"
    no_such_user_in_workspace: str = "No such user in your slack!"
    can_not_find_member: str = "<@{user}> is not a member of this project!"
    report_on_project_head: str = "Full Report on project #{channel} from {date_from} to {date_to}:\n\n"
    report_on_user_head: str = "Full Report on user <@{user}> from {date_from} to {date_to}:\n\n"
    report_on_project_and_user_head: str = "Report on user <@{user}> in project #{channel} from {date_from} to {date_to}:\n\n"
    report_date: str = "Report for {date}:\n"
    report_line: str = "<@{user}>: {comment}\n"
    report_no_data: str = "No data for this period"

    help_text: str = (
        "*Standup commands*\n"
        "• `/standup add @user1 @user2 [/ developer|pm|admin]` - assign roles\n"
        "• `/standup delete @user1 @user2 [/ developer|pm|admin]` - remove roles\n"
        "• `/standup list [developer|pm|admin]` - list users with a role\n"
        "• `/standup add_timetable @user1 @user2 on mon tue at 10:00` - set personal deadlines\n"
        "• `/standup show_timetable @user1` - show personal deadlines\n"
        "• `/standup remove_timetable @user1` - remove personal deadlines\n"
        "• `/standup add_deadline 10:00` - set channel standup time\n"
        "• `/standup show_deadline` - show channel standup time\n"
        "• `/standup remove_deadline` - remove channel standup time\n"
        "• `/standup report_on_project #channel 2024-01-01 2024-01-31`\n"
        "• `/standup report_on_user @user 2024-01-01 2024-01-31`\n"
        "• `/standup report_on_user_in_project #channel @user 2024-01-01 2024-01-31`"
    )


ENGLISH = Translation()

RUSSIAN = Translation(
    days_divider="по",
    time_divider="в",
    weekday_names=("Понедельник", "Вторник", "Среда", "Четверг", "Пятница", "Суббота", "Воскресенье"),
    access_at_least_admin="Доступ запрещен! Вы должны быть как минимум админом в этом слаке, чтобы использовать эту команду!",
    access_at_least_pm="Доступ запрещен! Вы должны быть как минимум ПМом в этом проекте, чтобы использовать эту команду!",
    access_at_least_admin_or_owner="Доступ запрещен! Вы должны быть админом или владельцем отчета, чтобы использовать эту команду!",
    access_at_least_pm_or_owner="Доступ запрещен! Вы должны быть ПМом в этом проекте или владельцем отчета, чтобы использовать эту команду!",
    channel_not_registered="Этот канал еще не зарегистрирован! Пригласите бота в канал и попробуйте снова.",
    user_not_registered="Вы еще не зарегистрированы в этом слаке! Попробуйте снова через минуту.",
    need_correct_user_role="Пожалуйста, проверьте название роли (админ, разработчик, пм)",
    add_members_failed="Не удалось добавить участников: {users}\n",
    add_members_exist="Участники уже имеют роли: {users}\n",
    add_members_added="Участники добавлены: {users}\n",
    add_pms_failed="Не удалось назначить ПМами: {users}\n",
    add_pms_exist="Пользователи уже имеют роли: {users}\n",
    add_pms_added="Пользователи назначены ПМами: {users}\n",
    add_admins_failed="Не удалось назначить админами: {users}\n",
    add_admins_exist="Пользователи уже являются админами: {users}\n",
    add_admins_added="Пользователи назначены админами: {users}\n",
    delete_members_failed="Не удалось удалить участников: {users}\n",
    delete_members_deleted="Участники удалены: {users}\n",
    delete_admins_failed="Не удалось снять права админа: {users}\n",
    delete_admins_deleted="Пользователи больше не админы: {users}\n",
    admin_assigned="Поздравляем! Вы назначены админом этого слака.",
    admin_removed="Вы больше не админ этого слака.",
    list_standupers="Стендаперы в этом канале: {users}",
    list_no_standupers="В этом канале нет стендаперов! Чтобы добавить, используйте команду `/standup add`",
    list_pms="ПМы в этом канале: {users}",
    list_no_pms="В этом канале нет ПМов! Чтобы добавить, используйте команду `/standup add @user / пм`",
    list_admins="Админы этого слака: {users}",
    list_no_admins="В этом слаке нет админов! Чтобы добавить, используйте команду `/standup add @user / админ`",
    wrong_username="Кажется, вы ошиблись в имени пользователя {value}. Проверьте и попробуйте снова!\n",
    wrong_time_format="Неверный формат времени {value}! Используйте формат ЧЧ:ММ, например 09:30",
    wrong_weekday="Неизвестный день недели {value}! Используйте пн, вт, ср, чт, пт, сб, вс",
    no_weekdays="Укажите хотя бы один день недели для расписания!",
    wrong_timetable_command="Неверная команда расписания! Используйте формат: @user1 @user2 по пн вт в 10:00",
    wrong_date="Неверная дата {value}! Используйте формат ГГГГ-ММ-ДД",
    wrong_date_range="Неверный период! Начальная дата {value} позже конечной",
    wrong_n_args="Неверное количество аргументов! Проверьте команду и попробуйте снова.",
    timetable_created="Расписание для <@{user}> создано: {timetable}\n",
    timetable_updated="Расписание для <@{user}> обновлено: {timetable}\n",
    timetable_show="Расписание <@{user}>: {timetable}\n",
    timetable_deleted="Расписание для <@{user}> удалено\n",
    can_not_update_timetable="Не удалось обновить расписание для <@{user}>: {error}\n",
    can_not_delete_timetable="Не удалось удалить расписание для <@{user}>: {error}\n",
    not_a_standuper="Кажется, <@{user}> не является стендапером в этом канале!\n",
    no_timetable_set="У <@{user}> нет расписания!\n",
    add_standup_time="<!date^{timestamp}^Время стендапа установлено на {{time}}|Время стендапа установлено на {time}>",
    add_standup_time_no_users="<!date^{timestamp}^Время стендапа {{time}} добавлено, но в канале нет стендаперов|Время стендапа {time} добавлено, но в канале нет стендаперов>",
    show_standup_time="<!date^{timestamp}^Время стендапа {{time}}|Время стендапа {time}>",
    show_no_standup_time="Время стендапа для этого канала не установлено! Добавьте его командой `/standup add_deadline`!",
    remove_standup_time="время стендапа для канала удалено",
    remove_standup_time_with_users="время стендапа для канала удалено, но в канале есть стендаперы.",
    wrong_project_name="Неверное название проекта!",
    no_such_user_in_workspace="В вашем слаке нет такого пользователя!",
    can_not_find_member="<@{user}> не является участником этого проекта!",
    report_on_project_head="Полный отчет по проекту #{channel} с {date_from} по {date_to}:\n\n",
    report_on_user_head="Полный отчет по пользователю <@{user}> с {date_from} по {date_to}:\n\n",
    report_on_project_and_user_head="Отчет по пользователю <@{user}> в проекте #{channel} с {date_from} по {date_to}:\n\n",
    report_date="Отчет за {date}:\n",
    report_no_data="Нет данных за этот период",
    help_text=(
        "*Команды стендапа*\n"
        "• `/standup add @user1 @user2 [/ разработчик|пм|админ]` - назначить роли\n"
        "• `/standup delete @user1 @user2 [/ разработчик|пм|админ]` - снять роли\n"
        "• `/standup list [разработчик|пм|админ]` - список пользователей с ролью\n"
        "• `/standup add_timetable @user1 @user2 по пн вт в 10:00` - личное расписание\n"
        "• `/standup show_timetable @user1` - показать расписание\n"
        "• `/standup remove_timetable @user1` - удалить расписание\n"
        "• `/standup add_deadline 10:00` - время стендапа канала\n"
        "• `/standup show_deadline` - показать время стендапа\n"
        "• `/standup remove_deadline` - удалить время стендапа\n"
        "• `/standup report_on_project #channel 2024-01-01 2024-01-31`\n"
        "• `/standup report_on_user @user 2024-01-01 2024-01-31`\n"
        "• `/standup report_on_user_in_project #channel @user 2024-01-01 2024-01-31`"
    ),
)

TRANSLATIONS = {
    "en": ENGLISH,
    "ru": RUSSIAN
}
